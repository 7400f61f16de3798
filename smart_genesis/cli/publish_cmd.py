"""smart-genesis publish: push existing project directories to GitHub."""

from __future__ import annotations

from pathlib import Path

import typer

from smart_genesis.cli.output import announce_consent, report_bootstrap
from smart_genesis.cli.runtime import guarded, setup_logging
from smart_genesis.config import GenesisConfig
from smart_genesis.types.bootstrap import StructureMode
from smart_genesis.workflow import publish_project


def publish(
    name: str = typer.Argument(..., help="Project (and repository) name"),
    directory: str = typer.Option(
        ".", "--directory", "-d", help="Directory holding the project directories"
    ),
    mode: StructureMode = typer.Option(
        StructureMode.SINGLE,
        "--mode",
        "-m",
        help="single: DIR/NAME becomes one repository; "
        "dual: DIR/NAME-frontend and DIR/NAME-backend become two",
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Show debug logging"),
) -> None:
    """Create GitHub repositories for an already scaffolded project and push it."""
    setup_logging(verbose)
    base = Path(directory).resolve()
    target = base / name if mode is StructureMode.SINGLE else base

    with guarded():
        config = GenesisConfig.from_env()
        announce_consent(config)
        result = publish_project(name, target, mode, config=config)
        report_bootstrap(result)

    if not result.succeeded:
        raise typer.Exit(code=1)
