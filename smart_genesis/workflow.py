"""
GitHub publishing workflow.

Consent screen, then token polling, then repository bootstrap: strictly in
that order, one attempt per run. The token only lives for the duration of
``publish_project``.
"""

import time
import webbrowser
from collections.abc import Callable
from pathlib import Path
from typing import Any

import httpx

from smart_genesis.auth import acquire_token
from smart_genesis.bootstrap import bootstrap_repositories, ensure_ready, plan_targets
from smart_genesis.config import GenesisConfig
from smart_genesis.git import GitHelper
from smart_genesis.transport import HTTPTransport
from smart_genesis.types.bootstrap import BootstrapResult, StructureMode


def publish_project(
    project_name: str,
    target_directory: str | Path,
    mode: StructureMode,
    config: GenesisConfig | None = None,
    opener: Callable[[str], Any] = webbrowser.open,
    sleep: Callable[[float], None] = time.sleep,
    poll_http: HTTPTransport | None = None,
    api_transport: httpx.BaseTransport | None = None,
    git: GitHelper | None = None,
) -> BootstrapResult:
    """
    Obtain an access token and publish the project to GitHub.

    Args:
        project_name: Base repository name
        target_directory: Project directory (SINGLE) or the directory
            holding both projects (DUAL_FRONTEND_BACKEND)
        mode: Structural mode
        config: Endpoints and workflow constants (default: GenesisConfig())
        opener: Browser opener for the consent screen
        sleep: Sleep function for the poll delay
        poll_http: HTTP transport for the token endpoint
        api_transport: httpx transport for the repository API
        git: Git helper

    Returns:
        BootstrapResult of the run

    Raises:
        BrowserOpenError: If the consent screen could not be opened
        PollTimeoutError: If no token arrived; no repository is created
        BootstrapError: If a local directory is missing or empty
        CommandError: If a Git command fails
    """
    config = config or GenesisConfig()

    # Fail before the consent screen if there is nothing to push
    for target in plan_targets(project_name, target_directory, mode, config.repo_description):
        ensure_ready(target.local_path)

    token = acquire_token(config, opener=opener, http=poll_http, sleep=sleep)
    return bootstrap_repositories(
        token,
        project_name,
        target_directory,
        mode,
        config=config,
        git=git,
        transport=api_transport,
    )
