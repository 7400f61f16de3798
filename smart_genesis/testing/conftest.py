"""
Pytest plugin for Smart Genesis testing fixtures.

To use these fixtures in your tests, add this to your conftest.py:

    pytest_plugins = ["smart_genesis.testing.conftest"]
"""

# Re-export all fixtures for pytest auto-discovery
from smart_genesis.testing.fixtures import (
    fast_config,
    mock_client,
    recording_git,
    recording_runner,
    sample_repository,
    scaffolded_pair,
    scaffolded_project,
)

__all__ = [
    "mock_client",
    "fast_config",
    "recording_runner",
    "recording_git",
    "scaffolded_project",
    "scaffolded_pair",
    "sample_repository",
]
