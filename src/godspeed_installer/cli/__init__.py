"""Command-line entry point for godspeed-install."""

from __future__ import annotations

from typing import Iterable, Optional

from godspeed_installer.cli.runner import CLIRunner


def main(argv: Optional[Iterable[str]] = None) -> int:
    """Run the installer and return its exit code."""
    return CLIRunner().run(argv)


__all__ = ["main", "CLIRunner"]
