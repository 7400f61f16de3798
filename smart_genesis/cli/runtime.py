"""Shared error handling and logging setup for CLI commands."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager

import typer

from smart_genesis.cli.output import error
from smart_genesis.exceptions import GenesisError
from smart_genesis.logging import configure_logging


def setup_logging(verbose: bool) -> None:
    """INFO for the package (DEBUG for HTTP) with --verbose, else warnings only."""
    if verbose:
        configure_logging(level=logging.INFO, http_level=logging.DEBUG)
    else:
        configure_logging(level=logging.WARNING, format_string="%(levelname)s: %(message)s")


@contextmanager
def guarded() -> Iterator[None]:
    """Turn package errors into exit code 1 and Ctrl-C into exit code 130."""
    try:
        yield
    except GenesisError as e:
        error(e.message)
        raise typer.Exit(code=1) from e
    except KeyboardInterrupt:
        error("Aborted.")
        raise typer.Exit(code=130) from None
