"""Commands the installer CLI can execute."""

from __future__ import annotations

from abc import ABC, abstractmethod
from argparse import Namespace


class Command(ABC):
    """Base class for CLI commands."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Command identifier."""

    @abstractmethod
    def execute(self, args: Namespace) -> int:
        """Run the command and return its exit code."""


# ruff: noqa: E402
from godspeed_installer.cli.commands.install import InstallCommand

__all__ = [
    "Command",
    "InstallCommand",
]
