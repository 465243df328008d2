"""Homebrew, the macOS package manager."""

from __future__ import annotations

import tempfile
from pathlib import Path
from typing import Optional

from godspeed_installer.bootstrap.download import download_file
from godspeed_installer.bootstrap.platform import PlatformProfile
from godspeed_installer.core.logging import get_logger
from godspeed_installer.tools.base import Tool

LOGGER = get_logger(__name__)

HOMEBREW_INSTALL_SCRIPT = "https://raw.githubusercontent.com/Homebrew/install/HEAD/install.sh"


class HomebrewTool(Tool):
    """Installs Homebrew on macOS, or updates an existing installation."""

    @property
    def name(self) -> str:
        return "brew"

    @property
    def display_name(self) -> str:
        return "Homebrew"

    def supports(self, profile: PlatformProfile) -> bool:
        return profile.is_macos

    def probe(self) -> bool:
        return self.on_path("brew")

    def on_present(self) -> None:
        LOGGER.info("Homebrew is already installed, updating")
        self.runner.run(["brew", "update"])

    def install(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            script = download_file(HOMEBREW_INSTALL_SCRIPT, Path(tmp) / "install.sh")
            self.runner.run(["/bin/bash", str(script)])

    def activate(self) -> None:
        # A fresh install is not on PATH until the shell runs `brew shellenv`.
        prefix = self.context.recipe.homebrew_prefix
        if prefix is None or self.probe():
            return
        brew_bin = prefix / "bin"
        if (brew_bin / "brew").exists():
            self.env.prepend_path(brew_bin)

    def version(self) -> Optional[str]:
        return self.query_version(["brew", "--version"])
