"""Shared fixtures for the Smart Genesis test suite."""

import pytest

from smart_genesis import logging as genesis_logging
from smart_genesis.logging import get_logger
from smart_genesis.testing.conftest import (  # noqa: F401
    fast_config,
    mock_client,
    recording_git,
    recording_runner,
    sample_repository,
    scaffolded_pair,
    scaffolded_project,
)


@pytest.fixture(autouse=True)
def restore_loggers():
    """Undo configure_logging() side effects after each test."""
    loggers = [get_logger(), get_logger("http"), get_logger("git")]
    levels = [logger.level for logger in loggers]
    handlers = list(loggers[0].handlers)
    installed = genesis_logging._installed_handler
    yield
    for logger, level in zip(loggers, levels):
        logger.setLevel(level)
    loggers[0].handlers = handlers
    genesis_logging._installed_handler = installed
