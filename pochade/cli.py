#!/usr/bin/env python3
"""Pochade CLI - create a new Node-RED plugin or web project from a template."""
import os
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape

from pochade.core.config import get_config
from pochade.core.logger import get_logger, set_verbose, setup_file_logging
from pochade.scaffold.answers import ConsoleAnswerSource, DefaultsAnswerSource
from pochade.scaffold.errors import ScaffoldError
from pochade.scaffold.installer import NpmInstaller
from pochade.scaffold.models import Variant
from pochade.scaffold.orchestrator import ScaffoldOrchestrator
from pochade.scaffold.variants import get_variant

app = typer.Typer(
    name="create-pochade",
    help="""Create a new project from a Pochade template.

Quick start:
  create-pochade node-red-contrib-my-node     # Node-RED plugin
  create-pochade my-site --variant web        # Static web project
""",
    add_completion=False,
)

console = Console()
logger = get_logger(__name__)


def is_mock() -> bool:
    """Return True when the CLI runs in mock mode (no package manager)."""
    return os.environ.get("POCHADE_MOCK") == "1"


def handle_cli_error(
    e: Exception,
    verbose: bool = False,
    exit_code: int = 1
) -> None:
    """Report a fatal error and exit.

    Args:
        e: Exception to handle
        verbose: Show exception traceback if True
        exit_code: Exit code to use
    """
    console.print(f"[red]Error:[/red] {escape(str(e))}", highlight=False)
    if verbose:
        console.print_exception()
    raise typer.Exit(exit_code)


@app.command()
def create(
    project_name: Optional[str] = typer.Argument(None, help="Project directory and package name"),
    variant: Variant = typer.Option(Variant.NODE_PLUGIN, "--variant", "-t", help="Kind of project to create"),
    yes: bool = typer.Option(False, "--yes", "-y", help="Accept every default without prompting"),
    skip_install: bool = typer.Option(False, "--skip-install", help="Do not install dependencies"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug output"),
    log_file: Optional[str] = typer.Option(None, "--log-file", help="Also write logs to this file"),
):
    """Scaffold PROJECT_NAME in the current directory."""
    if log_file:
        setup_file_logging(log_file=log_file, verbose=verbose)
    set_verbose(verbose)

    config = get_config()
    logger.debug(f"Scaffolding {project_name} as {variant.value}")
    source = DefaultsAnswerSource() if yes else ConsoleAnswerSource(console)
    orchestrator = ScaffoldOrchestrator(
        get_variant(variant),
        answer_source=source,
        installer=NpmInstaller(config.package_manager, mock=is_mock()),
        console=console,
        config=config,
        max_attempts=1 if yes else None,
    )

    try:
        orchestrator.run(project_name, install=not skip_install)
    except ScaffoldError as e:
        handle_cli_error(e, verbose=verbose)


if __name__ == "__main__":
    app()
