"""
Git helper utilities for Smart Genesis.

Turns a scaffolded directory into a local repository and pushes it to a
freshly created remote.
"""

from collections.abc import Callable
from pathlib import Path

from smart_genesis.commands import CommandRunner
from smart_genesis.config import GenesisConfig
from smart_genesis.types.bootstrap import BootstrapState


class GitHelper:
    """
    Helper for the local Git operations of a bootstrap run.

    Each method is a single ``git`` invocation through the command runner, so
    a failing step raises ``CommandError`` and nothing after it runs.

    Example:
        ```python
        from smart_genesis.git import GitHelper

        git = GitHelper()
        git.publish("./demo", "https://github.com/u/demo.git")
        ```
    """

    def __init__(
        self,
        runner: CommandRunner | None = None,
        config: GenesisConfig | None = None,
    ) -> None:
        """
        Initialize GitHelper.

        Args:
            runner: Command runner (default: a real CommandRunner)
            config: Supplies commit message, branch and remote names
        """
        self.runner = runner or CommandRunner()
        self.config = config or GenesisConfig()

    def init(self, local_path: str | Path) -> None:
        """Create an empty repository in ``local_path``."""
        self.runner.run(["git", "init"], Path(local_path))

    def add_all(self, local_path: str | Path) -> None:
        """Stage every file in ``local_path``."""
        self.runner.run(["git", "add", "."], Path(local_path))

    def commit(self, local_path: str | Path, message: str | None = None) -> None:
        """Commit the staged files."""
        self.runner.run(
            ["git", "commit", "-m", message or self.config.commit_message],
            Path(local_path),
        )

    def add_remote(self, local_path: str | Path, url: str) -> None:
        """Point the configured remote at ``url``."""
        self.runner.run(
            ["git", "remote", "add", self.config.remote_name, url], Path(local_path)
        )

    def rename_branch(self, local_path: str | Path) -> None:
        """Force-rename the current branch to the default branch."""
        self.runner.run(
            ["git", "branch", "-M", self.config.default_branch], Path(local_path)
        )

    def push_upstream(self, local_path: str | Path) -> None:
        """Push the default branch and set it as upstream."""
        self.runner.run(
            ["git", "push", "-u", self.config.remote_name, self.config.default_branch],
            Path(local_path),
        )

    def publish(
        self,
        local_path: str | Path,
        clone_url: str,
        on_step: Callable[[BootstrapState], None] | None = None,
    ) -> None:
        """
        Run init, add, commit, remote add, branch rename and push in order.

        Args:
            local_path: Directory holding the scaffolded project
            clone_url: Remote repository to push to
            on_step: Called with the state reached after each step

        Raises:
            CommandError: On the first failing step
        """
        steps: list[tuple[Callable[[], None], BootstrapState]] = [
            (lambda: self.init(local_path), BootstrapState.LOCAL_INIT_DONE),
            (lambda: self.add_all(local_path), BootstrapState.LOCAL_INIT_DONE),
            (lambda: self.commit(local_path), BootstrapState.COMMITTED),
            (lambda: self.add_remote(local_path, clone_url), BootstrapState.REMOTE_ADDED),
            (lambda: self.rename_branch(local_path), BootstrapState.BRANCH_RENAMED),
            (lambda: self.push_upstream(local_path), BootstrapState.PUSHED),
        ]
        for step, reached in steps:
            step()
            if on_step is not None:
                on_step(reached)
