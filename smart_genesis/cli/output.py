"""Rich terminal output for the Smart Genesis CLI."""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape

from smart_genesis.config import GenesisConfig
from smart_genesis.types.bootstrap import BootstrapResult

console = Console(highlight=False, soft_wrap=True)
err_console = Console(stderr=True, highlight=False, soft_wrap=True)

_PREFIX = "[bold cyan]\\[Smart Genesis][/bold cyan]"


def info(message: str) -> None:
    """Print a progress message."""
    console.print(f"{_PREFIX} {escape(message)}")


def error(message: str) -> None:
    """Print an error message to stderr."""
    err_console.print(f"{_PREFIX} [bold red]Error:[/bold red] {escape(message)}")


def report_bootstrap(result: BootstrapResult) -> None:
    """Summarize a bootstrap run."""
    for repo in result.created:
        info(f"Repository created: {repo.clone_url}")

    if result.succeeded:
        info("Code pushed to GitHub repository successfully.")
        return

    if result.error is not None:
        error(f"Error creating GitHub repository: {result.error.message}")
    if result.created:
        names = ", ".join(repo.name for repo in result.created)
        error(f"Created but not pushed (delete or push manually): {names}")


def announce_consent(config: GenesisConfig) -> None:
    """Tell the user where to authorize and how long the CLI will wait."""
    info("Opening GitHub OAuth consent screen...")
    info(f"If no browser opens, visit {config.login_url}")
    wait = config.max_attempts * config.poll_interval
    info(f"Waiting up to {wait:g} seconds for authorization...")
