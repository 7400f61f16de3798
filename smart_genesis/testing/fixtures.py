"""
Pytest fixtures for Smart Genesis testing.

Provides common fixtures for testing the token and bootstrap workflow
without a browser, a network or git.
"""

from pathlib import Path
from typing import Any, Generator

import pytest

from smart_genesis.config import GenesisConfig
from smart_genesis.git import GitHelper
from smart_genesis.testing.mock import MockGitHubClient, RecordingRunner
from smart_genesis.types.repos import Repository


# ============================================================================
# Mock Client Fixtures
# ============================================================================


@pytest.fixture
def mock_client() -> Generator[MockGitHubClient, None, None]:
    """
    Provide a MockGitHubClient for testing.

    Example:
        ```python
        def test_my_feature(mock_client):
            mock_client.repos.configure_create(response=my_repo)
            result = RepositoryBootstrapper(mock_client).run(...)
            assert mock_client.was_called("repos.create")
        ```
    """
    client = MockGitHubClient(owner="u")
    yield client
    client.reset()


@pytest.fixture
def fast_config() -> GenesisConfig:
    """A configuration with no poll delay and test-only endpoints."""
    return GenesisConfig(
        login_url="https://oauth.test/login",
        token_url="https://oauth.test/token",
        api_base_url="https://api.github.test",
        poll_interval=0.0,
    )


# ============================================================================
# Command Fixtures
# ============================================================================


@pytest.fixture
def recording_runner() -> RecordingRunner:
    """Provide a runner that records commands instead of running them."""
    return RecordingRunner()


@pytest.fixture
def recording_git(recording_runner: RecordingRunner, fast_config: GenesisConfig) -> GitHelper:
    """Provide a GitHelper wired to ``recording_runner``."""
    return GitHelper(runner=recording_runner, config=fast_config)


# ============================================================================
# Project Directory Fixtures
# ============================================================================


@pytest.fixture
def scaffolded_project(tmp_path: Path) -> Path:
    """A non-empty ``demo`` project directory."""
    return create_project_dir(tmp_path / "demo")


@pytest.fixture
def scaffolded_pair(tmp_path: Path) -> Path:
    """A directory holding non-empty ``demo-frontend`` and ``demo-backend``."""
    create_project_dir(tmp_path / "demo-frontend")
    create_project_dir(tmp_path / "demo-backend")
    return tmp_path


@pytest.fixture
def sample_repository() -> Repository:
    """Provide a sample Repository object."""
    return create_mock_repository()


# ============================================================================
# Helper Functions
# ============================================================================


def create_project_dir(path: Path, files: dict[str, str] | None = None) -> Path:
    """
    Create a directory with some files in it.

    Args:
        path: Directory to create
        files: Relative file names and contents (default: a README)

    Returns:
        The directory
    """
    path.mkdir(parents=True, exist_ok=True)
    for name, content in (files or {"README.md": "# demo\n"}).items():
        target = path / name
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(content, encoding="utf-8")
    return path


def create_mock_repository(
    name: str = "demo",
    owner: str = "u",
    **kwargs: Any,
) -> Repository:
    """
    Create a Repository with customizable fields.

    Args:
        name: Repository name
        owner: Account name used in URLs
        **kwargs: Additional fields to override

    Returns:
        Repository object
    """
    defaults = {
        "clone_url": f"https://github.com/{owner}/{name}.git",
        "full_name": f"{owner}/{name}",
        "html_url": f"https://github.com/{owner}/{name}",
        "private": False,
        "default_branch": "main",
    }
    defaults.update(kwargs)
    return Repository(name=name, **defaults)


__all__ = [
    # Fixtures (exported for documentation, actual fixtures are auto-discovered)
    "mock_client",
    "fast_config",
    "recording_runner",
    "recording_git",
    "scaffolded_project",
    "scaffolded_pair",
    "sample_repository",
    # Helper functions
    "create_project_dir",
    "create_mock_repository",
]
