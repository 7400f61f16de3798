"""
Repository bootstrapping.

Creates the remote repository record(s) for a scaffolded project and pushes
each local directory to its new remote. All remote creation happens before
any local Git command. If any creation call fails, no local command runs at
all; repositories created before the failure are reported but not deleted.
A failing Git command is fatal and propagates as ``CommandError``.
"""

from pathlib import Path

import httpx

from smart_genesis.client import GitHubClient
from smart_genesis.config import GenesisConfig
from smart_genesis.exceptions import BootstrapError, CommandError
from smart_genesis.git import GitHelper
from smart_genesis.logging import get_logger
from smart_genesis.types.bootstrap import (
    BootstrapResult,
    BootstrapState,
    BootstrapTarget,
    StructureMode,
)
from smart_genesis.types.repos import Repository, RepositoryDescriptor

logger = get_logger()


def plan_targets(
    project_name: str,
    target_directory: str | Path,
    mode: StructureMode,
    description: str,
) -> list[BootstrapTarget]:
    """
    Work out which directories get which repository.

    In SINGLE mode ``target_directory`` is the project itself. In
    DUAL_FRONTEND_BACKEND mode it is the directory holding
    ``<name>-frontend`` and ``<name>-backend``; frontend comes first.

    Args:
        project_name: Base repository name
        target_directory: See above
        mode: Structural mode
        description: Repository description

    Returns:
        Targets in processing order
    """
    target_directory = Path(target_directory)

    if mode is StructureMode.SINGLE:
        return [
            BootstrapTarget(
                local_path=target_directory,
                descriptor=RepositoryDescriptor(name=project_name, description=description),
            )
        ]

    targets = []
    for suffix in ("frontend", "backend"):
        name = f"{project_name}-{suffix}"
        targets.append(
            BootstrapTarget(
                local_path=target_directory / name,
                descriptor=RepositoryDescriptor(name=name, description=description),
            )
        )
    return targets


def ensure_ready(path: Path) -> None:
    """Raise BootstrapError unless ``path`` is a non-empty directory."""
    if not path.is_dir():
        raise BootstrapError(path, "directory does not exist")
    if not any(path.iterdir()):
        raise BootstrapError(path, "directory is empty, nothing to commit")


class RepositoryBootstrapper:
    """
    Creates remote repositories and pushes scaffolded directories to them.

    Example:
        ```python
        from smart_genesis import GitHubClient, RepositoryBootstrapper
        from smart_genesis.types import StructureMode

        with GitHubClient(token=token) as client:
            bootstrapper = RepositoryBootstrapper(client)
            result = bootstrapper.run("demo", "./demo", StructureMode.SINGLE)
        ```
    """

    def __init__(
        self,
        client: GitHubClient,
        git: GitHelper | None = None,
        config: GenesisConfig | None = None,
    ) -> None:
        """
        Args:
            client: Authenticated client (or a mock with the same ``repos`` API)
            git: Git helper (default: real git through a CommandRunner)
            config: Repository description and Git settings
        """
        self.client = client
        self.config = config or GenesisConfig()
        self.git = git or GitHelper(config=self.config)
        self.state = BootstrapState.IDLE

    def run(
        self,
        project_name: str,
        target_directory: str | Path,
        mode: StructureMode,
    ) -> BootstrapResult:
        """
        Create the repositories and push the local directories.

        Args:
            project_name: Base repository name
            target_directory: Project directory (SINGLE) or the directory
                holding both projects (DUAL_FRONTEND_BACKEND)
            mode: Structural mode

        Returns:
            BootstrapResult; state PUSHED on success, FAILED when a
            repository could not be created

        Raises:
            BootstrapError: If a local directory is missing or empty
            CommandError: If a Git command fails
        """
        self.state = BootstrapState.IDLE
        targets = plan_targets(
            project_name, target_directory, mode, self.config.repo_description
        )

        for target in targets:
            ensure_ready(target.local_path)

        created: list[Repository] = []
        for target in targets:
            result = self.client.repos.try_create(target.descriptor)
            if not result.ok:
                self.state = BootstrapState.FAILED
                if created:
                    names = ", ".join(repo.name for repo in created)
                    logger.warning(f"Left without a push: {names}")
                return BootstrapResult(
                    state=self.state, created=created, error=result.error
                )
            created.append(result.repository)
            target.clone_url = result.repository.clone_url

        self.state = BootstrapState.REMOTE_REPO_CREATED

        pushed: list[Path] = []
        for target in targets:
            try:
                self.git.publish(target.local_path, target.clone_url, on_step=self._advance)
            except CommandError:
                self.state = BootstrapState.FAILED
                raise
            pushed.append(target.local_path)
            logger.info(f"Code pushed to {target.clone_url}")

        return BootstrapResult(state=self.state, created=created, pushed=pushed)

    def _advance(self, state: BootstrapState) -> None:
        self.state = state


def bootstrap_repositories(
    token: str,
    project_name: str,
    target_directory: str | Path,
    mode: StructureMode,
    config: GenesisConfig | None = None,
    git: GitHelper | None = None,
    transport: httpx.BaseTransport | None = None,
) -> BootstrapResult:
    """
    Run one bootstrap with a client bound to ``token``.

    The client is closed before returning, so the token is not kept around.
    """
    config = config or GenesisConfig()
    with GitHubClient.from_config(token, config, transport=transport) as client:
        bootstrapper = RepositoryBootstrapper(client, git=git, config=config)
        return bootstrapper.run(project_name, target_directory, mode)
