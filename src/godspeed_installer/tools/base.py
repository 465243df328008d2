from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List, Optional, Sequence

from godspeed_installer.bootstrap.paths import InstallerPaths
from godspeed_installer.bootstrap.platform import PlatformProfile
from godspeed_installer.bootstrap.recipes import PlatformRecipe
from godspeed_installer.config.models import InstallerConfig
from godspeed_installer.core.environment import EnvironmentContext
from godspeed_installer.core.errors import BootstrapError, CommandError, VerificationError
from godspeed_installer.core.subprocess_runner import CommandRunner


@dataclass
class ToolContext:
    """Shared state handed to every tool.

    The profile and recipe are resolved once before the first stage and
    never change during a run.
    """

    profile: PlatformProfile
    recipe: PlatformRecipe
    paths: InstallerPaths
    env: EnvironmentContext
    runner: CommandRunner
    config: InstallerConfig


class Tool(ABC):
    """Base class for every tool the installer manages.

    Each tool wraps one external program and exposes it through a
    probe/install/verify interface so the pipeline never needs to know
    which package manager or download backs it.
    """

    def __init__(self, context: ToolContext) -> None:
        self.context = context

    @property
    @abstractmethod
    def name(self) -> str:
        """Tool identifier (e.g., 'git', 'nvm')."""

    @property
    def display_name(self) -> str:
        """Name shown to the operator."""
        return self.name

    def supports(self, profile: PlatformProfile) -> bool:
        """Whether the tool is part of the pipeline on this platform."""
        return True

    @abstractmethod
    def probe(self) -> bool:
        """Return True if the tool is already installed. Must not mutate state."""

    @abstractmethod
    def install(self) -> None:
        """Install the tool.

        Raises:
            BootstrapError: If the installation command fails.
        """

    def on_present(self) -> None:
        """Hook run when the probe finds the tool already installed."""

    def activate(self) -> None:
        """Make the tool usable by later stages of the current run."""

    def verify(self) -> bool:
        """Check the tool is usable after install; defaults to re-probing."""
        return self.probe()

    def verification_error(self) -> BootstrapError:
        """Error raised when verify() fails."""
        return VerificationError(self.name, f"{self.display_name} installation failed.")

    def version(self) -> Optional[str]:
        """Self-reported version, or None if the tool cannot report one."""
        return None

    def report(self, version: Optional[str]) -> List[str]:
        """Lines printed after the tool is verified."""
        if not version:
            return []
        return [f"{self.display_name} version: {version}"]

    def warnings(self) -> List[str]:
        """Problems worth telling the operator about that do not stop the run."""
        return []

    # Helpers

    @property
    def env(self) -> EnvironmentContext:
        return self.context.env

    @property
    def runner(self) -> CommandRunner:
        return self.context.runner

    def on_path(self, executable: str) -> bool:
        return self.env.which(executable) is not None

    def query_version(self, cmd: Sequence[str]) -> Optional[str]:
        """Run a --version style command, returning its first output line."""
        try:
            output = self.runner.output(cmd)
        except CommandError:
            return None
        return output.splitlines()[0].strip() if output else None

    def install_packages(self, *packages: str) -> None:
        """Install system packages with the platform's package manager."""
        recipe = self.context.recipe
        if recipe.package_refresh:
            self.runner.run(recipe.package_refresh)
        self.runner.run([*recipe.package_install, *packages])
