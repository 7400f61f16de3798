"""smart-genesis new: interactive project scaffolding.

Asks the project questions, runs the framework generators, overlays the
README and .gitignore templates, and optionally publishes the result to
GitHub.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from smart_genesis.cli.output import announce_consent, console, info, report_bootstrap
from smart_genesis.cli.runtime import guarded, setup_logging
from smart_genesis.config import GenesisConfig
from smart_genesis.scaffold import prompt_create_github, prompt_project, scaffold_project
from smart_genesis.workflow import publish_project


def new(
    directory: str = typer.Option(
        ".", "--directory", "-d", help="Directory to create the project in"
    ),
    github: Optional[bool] = typer.Option(
        None,
        "--github/--no-github",
        help="Create GitHub repositories without asking (default: ask)",
    ),
    force: bool = typer.Option(
        False, "--force", "-f", help="Write into existing non-empty directories"
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Show debug logging"),
) -> None:
    """Scaffold a new project and optionally push it to GitHub."""
    setup_logging(verbose)
    base = Path(directory).resolve()

    with guarded():
        answers = prompt_project(console)
        layout = scaffold_project(answers, base, force=force)
        info(f'Project scaffold for "{answers.project_name}" has been created.')

        create = github if github is not None else prompt_create_github(console)
        if not create:
            return

        config = GenesisConfig.from_env()
        announce_consent(config)
        result = publish_project(
            answers.project_name, layout.target_directory, layout.mode, config=config
        )
        report_bootstrap(result)

    if not result.succeeded:
        raise typer.Exit(code=1)
