"""Top-level scaffold flow.

Runs one project through a fixed sequence of states:

    VALIDATING_NAME -> CHECKING_TARGET -> PROMPTING -> COPYING_TEMPLATE
    -> RENAMING_ENTRY_FILES -> TRANSFORMING_TREE -> PATCHING_MANIFEST
    -> INSTALLING_DEPENDENCIES -> DONE

Any ScaffoldError moves the run to FAILED and is re-raised for the CLI to
report. Nothing is rolled back: once the template has been copied, a later
failure leaves the partially configured project on disk.
"""
from dataclasses import replace
from enum import Enum
from pathlib import Path
from typing import List, Optional

from pydantic import ValidationError
from rich.console import Console

from pochade.core.config import PochadeConfig, get_config, load_answer_defaults
from pochade.core.logger import get_logger
from pochade.scaffold.errors import (
    InstallError,
    ScaffoldError,
    TargetConflictError,
    TemplateMissingError,
    UsageError,
)
from pochade.scaffold.filestore import FileStore, LocalFileStore
from pochade.scaffold.installer import PackageInstaller
from pochade.scaffold.manifest import ManifestPatcher
from pochade.scaffold.models import ProjectConfig
from pochade.scaffold.prompter import AnswerSource, Prompter, PromptSpec
from pochade.scaffold.transformer import TreeTransformer
from pochade.scaffold.validator import validate_project_name
from pochade.scaffold.variants import ScaffoldVariant

logger = get_logger(__name__)


class ScaffoldState(Enum):
    """Steps of a scaffold run."""

    PENDING = "pending"
    VALIDATING_NAME = "validating_name"
    CHECKING_TARGET = "checking_target"
    PROMPTING = "prompting"
    COPYING_TEMPLATE = "copying_template"
    RENAMING_ENTRY_FILES = "renaming_entry_files"
    TRANSFORMING_TREE = "transforming_tree"
    PATCHING_MANIFEST = "patching_manifest"
    INSTALLING_DEPENDENCIES = "installing_dependencies"
    DONE = "done"
    FAILED = "failed"


class ScaffoldOrchestrator:
    """Creates one project from a variant's template."""

    def __init__(
        self,
        variant: ScaffoldVariant,
        answer_source: AnswerSource,
        installer: PackageInstaller,
        store: Optional[FileStore] = None,
        console: Optional[Console] = None,
        config: Optional[PochadeConfig] = None,
        output_dir: Optional[Path] = None,
        max_attempts: Optional[int] = None,
    ):
        self.variant = variant
        self.installer = installer
        self.store = store or LocalFileStore()
        self.console = console or Console()
        self.config = config or get_config()
        self.output_dir = output_dir or Path.cwd()
        self.prompter = Prompter(answer_source, self.console, max_attempts=max_attempts)
        self.transformer = TreeTransformer(self.store)
        self.patcher = ManifestPatcher(self.store)

        self.state = ScaffoldState.PENDING
        self.failed_state: Optional[ScaffoldState] = None
        self.failure: Optional[str] = None
        self.project_config: Optional[ProjectConfig] = None

    def run(self, project_name: Optional[str], install: bool = True) -> Path:
        """Scaffold ``project_name`` under the output directory.

        Args:
            project_name: Target directory and package name
            install: Run the package installer after patching

        Returns:
            Path to the created project

        Raises:
            ScaffoldError: On any fatal step; ``state`` is FAILED afterwards
        """
        try:
            self._enter(ScaffoldState.VALIDATING_NAME)
            name = self.validate_name(project_name)

            self._enter(ScaffoldState.CHECKING_TARGET)
            target = self.check_target(name)

            self._enter(ScaffoldState.PROMPTING)
            self.project_config = self.prompt(name)

            self._enter(ScaffoldState.COPYING_TEMPLATE)
            self.copy_template(target)

            self._enter(ScaffoldState.RENAMING_ENTRY_FILES)
            self.rename_entry_files(target, self.project_config)

            self._enter(ScaffoldState.TRANSFORMING_TREE)
            self.transform_tree(target, self.project_config)

            self._enter(ScaffoldState.PATCHING_MANIFEST)
            self.patcher.patch(target / self.variant.manifest_name, self.project_config, self.variant.variant)
            logger.info(f"Updated {self.variant.manifest_name}")

            if install:
                self._enter(ScaffoldState.INSTALLING_DEPENDENCIES)
                self.install(target)

            self._enter(ScaffoldState.DONE)
            self.print_next_steps(name)
            return target

        except ScaffoldError as e:
            self.failed_state = self.state
            self.failure = str(e)
            self.state = ScaffoldState.FAILED
            logger.debug(f"Scaffold failed while {self.failed_state.value}: {e}")
            raise

    def _enter(self, state: ScaffoldState) -> None:
        logger.debug(f"State: {self.state.value} -> {state.value}")
        self.state = state

    def validate_name(self, project_name: Optional[str]) -> str:
        if not project_name:
            raise UsageError("Please specify the project name.\nUsage: create-pochade <project-name>")

        reason = validate_project_name(project_name)
        if reason:
            raise UsageError(f'Invalid project name "{project_name}".\n{reason}')
        return project_name

    def check_target(self, name: str) -> Path:
        target = self.output_dir / name
        if self.store.exists(target):
            raise TargetConflictError(f'Directory "{name}" already exists.')
        return target

    def prompt_specs(self, name: str) -> List[PromptSpec]:
        """Variant questions with defaults from the answer defaults file applied."""
        specs = self.variant.prompts(name)
        overrides = load_answer_defaults(self.config.defaults_file, [spec.key for spec in specs])
        return [
            replace(spec, default=overrides[spec.key]) if spec.key in overrides else spec
            for spec in specs
        ]

    def prompt(self, name: str) -> ProjectConfig:
        if self.variant.banner:
            self.console.print(self.variant.banner, highlight=False, markup=False)
        self.console.print("\n📝 Let's set up your project!\n")

        answers = self.prompter.collect(self.prompt_specs(name), initial={"project_name": name})
        try:
            return self.variant.build_config(answers)
        except ValidationError as e:
            raise UsageError(f"Invalid project configuration: {e}") from e

    def template_path(self) -> Path:
        return self.config.template_dir / self.variant.template_name

    def copy_template(self, target: Path) -> None:
        template = self.template_path()
        if not self.store.exists(template):
            raise TemplateMissingError(f"Template directory not found: {template}")

        self.console.print(f"\n🚀 Creating a new project in {target}...")
        self.store.copy_tree(template, target)
        logger.info(f"Copied template {self.variant.template_name}")

    def rename_entry_files(self, target: Path, project_config: ProjectConfig) -> None:
        renames = [(name, f".{name}") for name in self.variant.dotfiles]
        renames.extend(self.variant.entry_renames(project_config))

        for src, dst in renames:
            src_path = target / src
            if not self.store.exists(src_path):
                logger.debug(f"Skipping rename of missing {src}")
                continue
            self.store.rename(src_path, target / dst)
            logger.debug(f"Renamed {src} -> {dst}")

    def transform_tree(self, target: Path, project_config: ProjectConfig) -> None:
        tokens = project_config.tokens()
        transformed = []

        if self.variant.text_extensions:
            transformed.extend(self.transformer.transform(target, tokens, self.variant.text_extensions))

        for page in self.variant.entry_pages:
            page_path = target / page
            if not self.store.exists(page_path):
                logger.debug(f"Entry page {page} not in template")
                continue
            self.transformer.transform_file(page_path, tokens)
            transformed.append(str(page_path))

        logger.info(f"Filled in {len(transformed)} template files")

        if self.config.warn_orphan_tokens:
            self.transformer.report_orphans(transformed)

    def install(self, target: Path) -> None:
        self.console.print("\n📦 Installing dependencies...")
        result = self.installer.install(str(target))
        if result.exit_code != 0:
            raise InstallError(
                f"{self.config.package_manager} install failed (exit code {result.exit_code}). "
                f"The project was left in {target}; run the install there to retry."
            )

    def print_next_steps(self, name: str) -> None:
        self.console.print("\n[green]✨ Success![/green]")
        self.console.print("\nTo get started:\n")
        self.console.print(f"  cd {name}", highlight=False)
        for step in self.variant.next_steps:
            self.console.print(f"  {step}", highlight=False)
        self.console.print("\n🎨 Happy coding!")
