"""Dependency installation for scaffolded projects."""
import subprocess
from dataclasses import dataclass
from typing import Protocol

from pochade.core.logger import get_logger

logger = get_logger(__name__)

# Conventional shell status for "command not found"
COMMAND_NOT_FOUND = 127


@dataclass
class InstallResult:
    """Outcome of a dependency install."""

    exit_code: int

    @property
    def ok(self) -> bool:
        return self.exit_code == 0


class PackageInstaller(Protocol):
    """Installs a project's dependencies."""

    def install(self, directory: str) -> InstallResult:
        ...


class NpmInstaller:
    """Runs ``<package manager> install`` with the operator's terminal attached."""

    def __init__(self, package_manager: str = "npm", mock: bool = False):
        self.package_manager = package_manager
        self.mock = mock

    def install(self, directory: str) -> InstallResult:
        """Install dependencies in ``directory``.

        Blocks until the package manager exits. Output is not captured.
        """
        cmd = [self.package_manager, "install"]

        if self.mock:
            logger.info(f"MOCK: Would run {' '.join(cmd)} in {directory}")
            return InstallResult(exit_code=0)

        try:
            result = subprocess.run(cmd, cwd=directory, check=False)
        except FileNotFoundError:
            logger.error(f"{self.package_manager} not found. Please install it first.")
            return InstallResult(exit_code=COMMAND_NOT_FOUND)

        return InstallResult(exit_code=result.returncode)
