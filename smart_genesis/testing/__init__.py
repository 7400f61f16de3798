"""Smart Genesis testing utilities.

Provides mock clients, a recording command runner and fixtures for testing
the publishing workflow without a browser, a network or git.
"""

from smart_genesis.testing.fixtures import create_mock_repository, create_project_dir
from smart_genesis.testing.mock import (
    MockCall,
    MockGitHubClient,
    MockResponse,
    RecordingRunner,
    ScriptedEndpoint,
)

__all__ = [
    # Mock client
    "MockGitHubClient",
    "MockCall",
    "MockResponse",
    # Commands and HTTP
    "RecordingRunner",
    "ScriptedEndpoint",
    # Helper functions
    "create_mock_repository",
    "create_project_dir",
]
