"""Interactive questions for `smart-genesis new`."""

from __future__ import annotations

import re

from rich.console import Console
from rich.prompt import Confirm, Prompt

from smart_genesis.types.project import (
    BACKEND_FRAMEWORKS,
    CLI_LANGUAGES,
    FRONTEND_FRAMEWORKS,
    PROJECT_TYPES,
    REPO_STRUCTURES,
    ProjectAnswers,
)

# Characters GitHub accepts in repository names
_NAME_RE = re.compile(r"[A-Za-z0-9._-]+")


def is_valid_project_name(name: str) -> bool:
    return bool(_NAME_RE.fullmatch(name)) and name not in (".", "..")


def _ask_name(console: Console) -> str:
    while True:
        name = Prompt.ask(
            "Enter your project name", default="my-awesome-project", console=console
        ).strip()
        if is_valid_project_name(name):
            return name
        console.print(
            "[red]Use only letters, digits, '.', '-' and '_' in the project name.[/red]"
        )


def prompt_project(console: Console | None = None) -> ProjectAnswers:
    """Ask the scaffolding questions and return the answers.

    Follow-up questions depend on the project type: web apps ask about the
    frontend, an optional backend and the repository structure; APIs ask for a
    framework; CLI tools ask for a language.
    """
    console = console or Console()

    answers = ProjectAnswers(
        project_name=_ask_name(console),
        project_type=Prompt.ask(
            "Select the type of project",
            choices=list(PROJECT_TYPES),
            default="Web App",
            console=console,
        ),
    )
    answers.description = Prompt.ask(
        "Enter a short project description (optional)", default="", console=console
    )

    if answers.project_type == "Web App":
        answers.frontend_framework = Prompt.ask(
            "Select your frontend framework",
            choices=list(FRONTEND_FRAMEWORKS),
            default="Next.js",
            console=console,
        )
        answers.include_backend = Confirm.ask(
            "Do you need a backend?", default=True, console=console
        )
        if answers.include_backend:
            answers.backend_framework = Prompt.ask(
                "Select your backend framework",
                choices=list(BACKEND_FRAMEWORKS),
                default="Nest.js",
                console=console,
            )
            answers.repo_structure = Prompt.ask(
                "Do you want a monorepo or separate repositories for frontend and backend?",
                choices=list(REPO_STRUCTURES),
                default="Monorepo",
                console=console,
            )
        if answers.frontend_framework in ("Next.js", "Vite"):
            answers.use_typescript = Confirm.ask(
                "Would you like to use TypeScript for your frontend?",
                default=True,
                console=console,
            )
    elif answers.project_type == "API":
        answers.api_framework = Prompt.ask(
            "Select your API framework",
            choices=list(BACKEND_FRAMEWORKS),
            default="Nest.js",
            console=console,
        )
    else:
        answers.cli_language = Prompt.ask(
            "Select your preferred language for the CLI tool",
            choices=list(CLI_LANGUAGES),
            default="Node.js",
            console=console,
        )

    return answers


def prompt_create_github(console: Console | None = None) -> bool:
    """Ask whether to create GitHub repositories for the project."""
    return Confirm.ask(
        "Would you like to create a Git repository for your project?",
        default=False,
        console=console or Console(),
    )
