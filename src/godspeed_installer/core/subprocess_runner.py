"""Blocking subprocess execution for installer commands.

Commands run one at a time with the EnvironmentContext's variables and
no timeout of their own; package managers and download tools apply their
own timeouts and retries.
"""

from __future__ import annotations

import shlex
import subprocess
from pathlib import Path
from typing import List, Optional, Sequence, Union

from godspeed_installer.core.environment import EnvironmentContext
from godspeed_installer.core.errors import CommandError
from godspeed_installer.core.logging import get_logger

LOGGER = get_logger(__name__)


def format_command(cmd: Sequence[str]) -> str:
    return shlex.join(list(cmd))


class CommandRunner:
    """Runs external commands against an EnvironmentContext."""

    def __init__(self, env: EnvironmentContext, timeout: Optional[float] = None) -> None:
        self.env = env
        self.timeout = timeout

    def run(
        self,
        cmd: Sequence[str],
        *,
        capture: bool = False,
        check: bool = True,
        cwd: Optional[Union[str, Path]] = None,
    ) -> subprocess.CompletedProcess:
        """Run a command to completion.

        Output goes straight to the terminal unless ``capture`` is set, so
        installers that print progress or ask for a sudo password keep
        working.

        Args:
            cmd: Command and arguments.
            capture: Capture stdout/stderr as text instead of inheriting them.
            check: Raise CommandError on a non-zero exit status.
            cwd: Working directory for the command.

        Returns:
            The CompletedProcess.

        Raises:
            CommandError: If check is set and the command fails, or the
                executable does not exist.
        """
        argv: List[str] = [str(part) for part in cmd]
        LOGGER.info(f"CMD {format_command(argv)}")

        try:
            result = subprocess.run(
                argv,
                capture_output=capture,
                text=True,
                encoding="utf-8",
                errors="replace",
                cwd=str(cwd) if cwd is not None else None,
                env=self.env.as_env(),
                timeout=self.timeout,
            )
        except FileNotFoundError as e:
            if not check:
                return subprocess.CompletedProcess(argv, 127, "", str(e))
            raise CommandError(argv, 127, str(e)) from e

        if capture and result.stderr:
            LOGGER.debug(f"STDERR {result.stderr.strip()}")

        if check and result.returncode != 0:
            raise CommandError(argv, result.returncode, result.stderr if capture else "")

        return result

    def output(self, cmd: Sequence[str]) -> str:
        """Run a command and return its stripped stdout."""
        return self.run(cmd, capture=True).stdout.strip()

    def succeeds(self, cmd: Sequence[str]) -> bool:
        """Run a command quietly and report whether it exited with status 0."""
        return self.run(cmd, capture=True, check=False).returncode == 0

    def shell(self, script: str, *, capture: bool = False, check: bool = True) -> subprocess.CompletedProcess:
        """Run a bash snippet, for shell functions such as nvm."""
        return self.run(["bash", "-c", script], capture=capture, check=check)
