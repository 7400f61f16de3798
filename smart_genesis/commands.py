"""
External command execution.

Every generator and Git invocation goes through ``CommandRunner.run``: one
blocking subprocess that inherits the terminal, with any failure raised as
``CommandError``.
"""

import subprocess
from pathlib import Path

from smart_genesis.exceptions import CommandError
from smart_genesis.logging import log_command


class CommandRunner:
    """Runs external commands synchronously in a given directory."""

    def run(self, command: list[str], cwd: str | Path) -> None:
        """
        Run a command to completion.

        Args:
            command: Program and arguments (no shell interpretation)
            cwd: Working directory

        Raises:
            CommandError: If the program is missing or exits non-zero
        """
        cwd = Path(cwd)
        log_command(command, str(cwd))

        try:
            subprocess.run(command, cwd=cwd, check=True)
        except subprocess.CalledProcessError as e:
            raise CommandError(command, cwd, e.returncode) from e
        except OSError as e:
            raise CommandError(command, cwd, None, reason=e.strerror or str(e)) from e
