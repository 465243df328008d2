"""pnpm, activated through Corepack."""

from __future__ import annotations

from typing import Optional

from godspeed_installer.tools.base import Tool


class PnpmTool(Tool):
    @property
    def name(self) -> str:
        return "pnpm"

    def probe(self) -> bool:
        return self.on_path("pnpm")

    def install(self) -> None:
        self.runner.run(["corepack", "enable"])
        self.runner.run(["corepack", "prepare", self.context.config.packages.pnpm, "--activate"])

    def version(self) -> Optional[str]:
        return self.query_version(["pnpm", "--version"])
