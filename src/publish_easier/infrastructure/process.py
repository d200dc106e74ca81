"""Synchronous shell command execution.

Commands inherit stdin/stdout/stderr and the current environment, so build
and registry output goes straight to the user's terminal. Every command is
attempted once: no retries, no timeout.
"""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path

logger = logging.getLogger(__name__)


class CommandError(Exception):
    """A shell command could not be started or exited non-zero."""

    def __init__(self, command: str, returncode: int | None, reason: str = "") -> None:
        self.command = command
        self.returncode = returncode
        if returncode is None:
            message = f"Command could not be started: {command}"
        else:
            message = f"Command failed with exit code {returncode}: {command}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


def run_command(command: str, cwd: Path) -> None:
    """Run *command* through the shell inside *cwd* and wait for it.

    Raises:
        CommandError: On a non-zero exit or if the shell cannot be launched.
    """
    logger.debug("Running %r in %s", command, cwd)
    try:
        subprocess.run(command, shell=True, cwd=cwd, check=True)
    except subprocess.CalledProcessError as exc:
        logger.error("Error executing command: %s", command)
        raise CommandError(command, exc.returncode) from exc
    except OSError as exc:
        logger.error("Error executing command: %s", command)
        raise CommandError(command, None, str(exc)) from exc
