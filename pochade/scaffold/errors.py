"""Scaffold error taxonomy.

Every error is fatal for the run. The CLI maps them to exit code 1.
"""


class ScaffoldError(Exception):
    """Base class for errors that abort a scaffold run."""


class UsageError(ScaffoldError):
    """Project name missing or invalid."""


class TargetConflictError(ScaffoldError):
    """Target directory already exists."""


class TemplateMissingError(ScaffoldError):
    """Bundled template directory not found."""


class ManifestError(ScaffoldError):
    """package.json missing or unparsable."""


class InstallError(ScaffoldError):
    """Dependency installation exited non-zero."""
