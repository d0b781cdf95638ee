"""Template-instantiation engine for new Node-RED plugins and web projects."""

from .errors import (
    InstallError,
    ManifestError,
    ScaffoldError,
    TargetConflictError,
    TemplateMissingError,
    UsageError,
)
from .manifest import ManifestPatcher
from .orchestrator import ScaffoldOrchestrator, ScaffoldState
from .prompter import Prompter, PromptSpec
from .substitutor import substitute
from .transformer import TreeTransformer
from .validator import validate_node_name, validate_project_name

__all__ = [
    "ScaffoldOrchestrator",
    "ScaffoldState",
    "Prompter",
    "PromptSpec",
    "TreeTransformer",
    "ManifestPatcher",
    "substitute",
    "validate_project_name",
    "validate_node_name",
    "ScaffoldError",
    "UsageError",
    "TargetConflictError",
    "TemplateMissingError",
    "ManifestError",
    "InstallError",
]
