"""Node.js LTS, installed through nvm."""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional

from godspeed_installer.core.logging import get_logger
from godspeed_installer.tools.base import Tool
from godspeed_installer.tools.nvm import NvmTool

LOGGER = get_logger(__name__)


class NodeTool(Tool):
    """Installs and selects the latest Node.js LTS release."""

    def __init__(self, context, nvm: NvmTool) -> None:
        super().__init__(context)
        self._nvm = nvm

    @property
    def name(self) -> str:
        return "node"

    @property
    def display_name(self) -> str:
        return "Node.js"

    def probe(self) -> bool:
        return self.on_path("node")

    def install(self) -> None:
        self._nvm.run_nvm("install", "--lts")
        self._nvm.run_nvm("use", "--lts")

    def activate(self) -> None:
        # `nvm use` only affects its own shell; export the bin dir ourselves.
        if self.probe():
            return
        result = self._nvm.nvm_shell(
            "nvm use --lts >/dev/null && command -v node", capture=True, check=False
        )
        lines = result.stdout.strip().splitlines() if result.returncode == 0 else []
        if not lines:
            LOGGER.debug("nvm did not report a node binary")
            return
        node_bin = Path(lines[-1].strip()).parent
        LOGGER.info(f"Adding {node_bin} to PATH")
        self.env.prepend_path(node_bin)

    def version(self) -> Optional[str]:
        return self.query_version(["node", "-v"])

    def report(self, version: Optional[str]) -> List[str]:
        lines = super().report(version)
        npm_version = self.query_version(["npm", "-v"])
        if npm_version:
            lines.append(f"npm version: {npm_version}")
        return lines
