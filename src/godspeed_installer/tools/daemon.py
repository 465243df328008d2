"""The Godspeed daemon, a prebuilt binary downloaded from GitHub releases."""

from __future__ import annotations

import shutil
import tempfile
from pathlib import Path
from typing import List

from godspeed_installer.bootstrap.download import download_file
from godspeed_installer.bootstrap.recipes import DAEMON_BINARY_NAME
from godspeed_installer.bootstrap.validation import ToolStatus, validate_tool
from godspeed_installer.core.logging import get_logger
from godspeed_installer.tools.base import Tool

LOGGER = get_logger(__name__)


class DaemonTool(Tool):
    """Downloads godspeed-daemon into the platform's bin directory.

    macOS installs into ~/.local/bin and exports it from the shell profile;
    Linux installs into /usr/local/bin with sudo.
    """

    @property
    def name(self) -> str:
        return DAEMON_BINARY_NAME

    @property
    def display_name(self) -> str:
        return "Godspeed daemon"

    @property
    def destination(self) -> Path:
        return self.context.recipe.daemon_path

    def probe(self) -> bool:
        return validate_tool(self.destination) is not ToolStatus.MISSING

    def install(self) -> None:
        recipe = self.context.recipe
        LOGGER.info(f"Installing {recipe.daemon_url} to {self.destination}")

        with tempfile.TemporaryDirectory() as tmp:
            downloaded = download_file(recipe.daemon_url, Path(tmp) / DAEMON_BINARY_NAME)

            if recipe.elevated:
                self.runner.run(["sudo", "mkdir", "-p", str(recipe.daemon_dir)])
                self.runner.run(
                    [
                        "sudo", "install",
                        "-m", format(recipe.daemon_mode, "o"),
                        str(downloaded), str(self.destination),
                    ]
                )
            else:
                recipe.daemon_dir.mkdir(parents=True, exist_ok=True)
                shutil.copyfile(downloaded, self.destination)
                self.destination.chmod(recipe.daemon_mode)

    def activate(self) -> None:
        recipe = self.context.recipe
        if not recipe.persist_path:
            return
        # The directory itself is the marker, so the export is added once.
        self.env.persist_lines(
            [f'export PATH="$PATH:{recipe.daemon_dir}"'],
            marker=str(recipe.daemon_dir),
        )
        self.env.append_path(recipe.daemon_dir)

    def warnings(self) -> List[str]:
        if validate_tool(self.destination) is ToolStatus.NOT_EXECUTABLE:
            return [
                f"{self.destination} is not executable. "
                f"Run 'sudo chmod +x {self.destination}' before starting the daemon, "
                "or set daemon.set_executable in the installer config."
            ]
        return []
