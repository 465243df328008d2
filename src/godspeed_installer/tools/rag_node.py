"""rag-node, installed globally with npm."""

from __future__ import annotations

from pathlib import Path

from godspeed_installer.core.errors import BootstrapError, CommandError, MissingPathError
from godspeed_installer.tools.base import Tool


class RagNodeTool(Tool):
    @property
    def name(self) -> str:
        return "rag-node"

    @property
    def package(self) -> str:
        return self.context.config.packages.rag_node

    def install_dir(self) -> Path:
        """Resolve the package directory under npm's global prefix.

        Raises:
            CommandError: If npm cannot report its prefix.
        """
        prefix = self.runner.output(["npm", "prefix", "-g"])
        return Path(prefix) / "lib" / "node_modules" / self.package

    def probe(self) -> bool:
        try:
            return self.install_dir().is_dir()
        except CommandError:
            return False

    def install(self) -> None:
        self.runner.run(["npm", "install", "-g", self.package])

    def verification_error(self) -> BootstrapError:
        path = self.install_dir()
        return MissingPathError(path, f"{self.name} installation directory not found at {path}")
