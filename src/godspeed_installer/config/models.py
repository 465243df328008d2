"""Typed installer configuration."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from godspeed_installer.bootstrap.versions import get_tool_version

DEFAULT_CLI_PACKAGE = "@godspeedsystems/godspeed"
DEFAULT_RAG_NODE_PACKAGE = "rag-node"
DEFAULT_PNPM_SPEC = "pnpm@latest"
DEFAULT_SECRET_KEY = "GOOGLE_API_KEY"


@dataclass
class VersionsConfig:
    """Pinned versions of downloaded artifacts."""

    daemon: str = field(default_factory=lambda: get_tool_version("daemon"))
    nvm: str = field(default_factory=lambda: get_tool_version("nvm"))


@dataclass
class PackagesConfig:
    """npm package names and the pnpm release Corepack activates."""

    cli: str = DEFAULT_CLI_PACKAGE
    rag_node: str = DEFAULT_RAG_NODE_PACKAGE
    pnpm: str = DEFAULT_PNPM_SPEC


@dataclass
class DaemonConfig:
    """Daemon install options.

    Attributes:
        set_executable: Force the executable bit on or off; None keeps the
            platform default (set on macOS, left unset on Linux).
    """

    set_executable: Optional[bool] = None


@dataclass
class SecretsConfig:
    """Name of the key written to rag-node's .env file."""

    env_key: str = DEFAULT_SECRET_KEY


@dataclass
class InstallerConfig:
    """Complete installer configuration."""

    shell_profile: Optional[Path] = None
    versions: VersionsConfig = field(default_factory=VersionsConfig)
    packages: PackagesConfig = field(default_factory=PackagesConfig)
    daemon: DaemonConfig = field(default_factory=DaemonConfig)
    secrets: SecretsConfig = field(default_factory=SecretsConfig)

    _config_sources: List[str] = field(default_factory=list, repr=False)

    @property
    def sources(self) -> List[str]:
        """Where the configuration was loaded from, lowest precedence first."""
        return list(self._config_sources)
