from __future__ import annotations

from typing import Optional

from godspeed_installer.tools.base import Tool


class GitTool(Tool):
    @property
    def name(self) -> str:
        return "git"

    @property
    def display_name(self) -> str:
        return "Git"

    def probe(self) -> bool:
        return self.on_path("git")

    def install(self) -> None:
        self.install_packages("git")

    def version(self) -> Optional[str]:
        return self.query_version(["git", "--version"])
