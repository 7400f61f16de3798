"""Smart Genesis CLI entry point."""

import typer
from dotenv import load_dotenv

from smart_genesis import __version__
from smart_genesis.cli.new_cmd import new
from smart_genesis.cli.publish_cmd import publish

app = typer.Typer(
    name="smart-genesis",
    help="Scaffold projects and publish them to GitHub",
    no_args_is_help=True,
)

# Register subcommands
app.command()(new)
app.command()(publish)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"smart-genesis {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        help="Show version and exit.",
        callback=version_callback,
        is_eager=True,
    ),
) -> None:
    """Scaffold projects and publish them to GitHub."""
    load_dotenv()
