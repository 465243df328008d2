"""The Godspeed CLI, installed globally with npm."""

from __future__ import annotations

from typing import Optional

from godspeed_installer.tools.base import Tool


class GodspeedCliTool(Tool):
    @property
    def name(self) -> str:
        return "godspeed"

    @property
    def display_name(self) -> str:
        return "Godspeed CLI"

    def probe(self) -> bool:
        return self.on_path("godspeed")

    def install(self) -> None:
        self.runner.run(["npm", "install", "-g", self.context.config.packages.cli])

    def version(self) -> Optional[str]:
        return self.query_version(["godspeed", "--version"])
