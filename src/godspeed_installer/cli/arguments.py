"""Argument parser construction for the installer CLI.

The installer takes no subcommands: running ``godspeed-install`` with no
arguments performs the full installation. Only logging and config flags
are accepted.
"""

from __future__ import annotations

import argparse
from pathlib import Path


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="godspeed-install",
        description=(
            "Install the Godspeed toolchain: Homebrew (macOS), NVM, Node.js LTS, "
            "pnpm, Git, the Godspeed CLI and daemon, and rag-node."
        ),
    )
    parser.add_argument(
        "--version",
        action="store_true",
        help="Show installer version and exit.",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging.",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose (info-level) logging.",
    )
    parser.add_argument(
        "--quiet", "-q",
        action="store_true",
        help="Reduce logging output to errors only.",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Installer config file (default: ~/.godspeed/installer.yml if present).",
    )
    return parser
