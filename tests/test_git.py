"""Tests for GitHelper and CommandRunner."""

import sys
from pathlib import Path

import pytest

from smart_genesis.commands import CommandRunner
from smart_genesis.config import GenesisConfig
from smart_genesis.exceptions import CommandError
from smart_genesis.git import GitHelper
from smart_genesis.testing import RecordingRunner
from smart_genesis.types.bootstrap import BootstrapState


class TestGitHelper:
    """Each helper method is a single git invocation."""

    def test_individual_commands(self, recording_runner: RecordingRunner, tmp_path: Path) -> None:
        git = GitHelper(recording_runner)

        git.init(tmp_path)
        git.add_all(tmp_path)
        git.commit(tmp_path)
        git.commit(tmp_path, "custom message")
        git.add_remote(tmp_path, "https://github.com/u/demo.git")
        git.rename_branch(tmp_path)
        git.push_upstream(tmp_path)

        assert recording_runner.commands_in(tmp_path) == [
            ["git", "init"],
            ["git", "add", "."],
            ["git", "commit", "-m", "Initial commit with scaffolded project"],
            ["git", "commit", "-m", "custom message"],
            ["git", "remote", "add", "origin", "https://github.com/u/demo.git"],
            ["git", "branch", "-M", "main"],
            ["git", "push", "-u", "origin", "main"],
        ]

    def test_config_overrides(self, recording_runner: RecordingRunner, tmp_path: Path) -> None:
        config = GenesisConfig(
            commit_message="first", default_branch="trunk", remote_name="upstream"
        )
        GitHelper(recording_runner, config).publish(tmp_path, "https://example.com/r.git")

        assert recording_runner.commands_in(tmp_path) == [
            ["git", "init"],
            ["git", "add", "."],
            ["git", "commit", "-m", "first"],
            ["git", "remote", "add", "upstream", "https://example.com/r.git"],
            ["git", "branch", "-M", "trunk"],
            ["git", "push", "-u", "upstream", "trunk"],
        ]

    def test_publish_reports_states(self, recording_runner: RecordingRunner, tmp_path: Path) -> None:
        reached: list[BootstrapState] = []
        GitHelper(recording_runner).publish(
            tmp_path, "https://github.com/u/demo.git", on_step=reached.append
        )

        assert reached == [
            BootstrapState.LOCAL_INIT_DONE,
            BootstrapState.LOCAL_INIT_DONE,
            BootstrapState.COMMITTED,
            BootstrapState.REMOTE_ADDED,
            BootstrapState.BRANCH_RENAMED,
            BootstrapState.PUSHED,
        ]

    def test_publish_stops_at_first_failure(self, tmp_path: Path) -> None:
        runner = RecordingRunner(fail_when=lambda command: command[:3] == ["git", "remote", "add"])
        reached: list[BootstrapState] = []

        with pytest.raises(CommandError):
            GitHelper(runner).publish(
                tmp_path, "https://github.com/u/demo.git", on_step=reached.append
            )

        assert len(runner.commands) == 4
        assert reached[-1] is BootstrapState.COMMITTED


class TestCommandRunner:
    """Tests against real subprocesses."""

    def test_success(self, tmp_path: Path) -> None:
        CommandRunner().run(
            [sys.executable, "-c", "open('marker', 'w').close()"], tmp_path
        )

        assert (tmp_path / "marker").exists()

    def test_nonzero_exit_raises(self, tmp_path: Path) -> None:
        command = [sys.executable, "-c", "import sys; sys.exit(3)"]

        with pytest.raises(CommandError) as exc_info:
            CommandRunner().run(command, tmp_path)

        assert exc_info.value.returncode == 3
        assert exc_info.value.command == command
        assert exc_info.value.cwd == tmp_path
        assert exc_info.value.code == "COMMAND_FAILED"

    def test_missing_program_raises(self, tmp_path: Path) -> None:
        with pytest.raises(CommandError) as exc_info:
            CommandRunner().run(["smart-genesis-no-such-program"], tmp_path)

        assert exc_info.value.returncode is None

    def test_command_is_logged(self, tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level("INFO", logger="smart_genesis.git"):
            CommandRunner().run([sys.executable, "-c", "pass"], tmp_path)

        assert any("Running:" in record.message for record in caplog.records)
