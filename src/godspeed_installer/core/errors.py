"""Exception hierarchy for the bootstrap pipeline.

Every failure that should stop the installer derives from BootstrapError.
The CLI runner is the only place these are turned into exit codes.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Sequence


class BootstrapError(Exception):
    """Base class for unrecoverable installer failures."""

    def __init__(self, message: str, hint: Optional[str] = None) -> None:
        super().__init__(message)
        self.message = message
        self.hint = hint


class UnsupportedPlatformError(BootstrapError):
    """The host operating system is not macOS or Linux."""


class DependencyLoadError(BootstrapError):
    """A tool was installed but cannot be loaded into the current session."""


class VerificationError(BootstrapError):
    """An install step finished but the tool is still not detectable."""

    def __init__(self, tool_name: str, message: str, hint: Optional[str] = None) -> None:
        super().__init__(message, hint=hint)
        self.tool_name = tool_name


class MissingPathError(BootstrapError):
    """A computed path that must exist was not found on disk."""

    def __init__(self, path: Path, message: str) -> None:
        super().__init__(message)
        self.path = path


class CommandError(BootstrapError):
    """An external command exited with a non-zero status."""

    def __init__(self, cmd: Sequence[str], returncode: int, stderr: str = "") -> None:
        self.cmd = list(cmd)
        self.returncode = returncode
        self.stderr = stderr
        message = f"Command failed ({returncode}): {' '.join(self.cmd)}"
        if stderr:
            message = f"{message}\n{stderr.strip()}"
        super().__init__(message)


class DownloadError(BootstrapError):
    """An HTTPS download could not be completed."""
