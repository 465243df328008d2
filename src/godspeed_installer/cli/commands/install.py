"""Install command implementation."""

from __future__ import annotations

from argparse import Namespace
from typing import Mapping, Optional

from godspeed_installer.bootstrap.paths import InstallerPaths
from godspeed_installer.bootstrap.platform import detect_platform
from godspeed_installer.cli.commands import Command
from godspeed_installer.cli.exit_codes import EXIT_SUCCESS
from godspeed_installer.config.loader import load_config
from godspeed_installer.core.console import Console
from godspeed_installer.core.environment import EnvironmentContext
from godspeed_installer.core.logging import get_logger
from godspeed_installer.pipeline.credentials import QuestionaryPrompt, SecretPrompt
from godspeed_installer.pipeline.executor import BootstrapOrchestrator, require_supported

LOGGER = get_logger(__name__)


class InstallCommand(Command):
    """Runs the full bootstrap pipeline on this machine."""

    def __init__(
        self,
        console: Console,
        prompt: Optional[SecretPrompt] = None,
        environ: Optional[Mapping[str, str]] = None,
    ) -> None:
        self._console = console
        self._prompt = prompt or QuestionaryPrompt()
        self._environ = environ

    @property
    def name(self) -> str:
        return "install"

    def execute(self, args: Namespace) -> int:
        """Detect the platform, load config and run the pipeline.

        Raises:
            BootstrapError: Propagated from the pipeline.
            ConfigError: If the installer config is invalid.
        """
        env = EnvironmentContext.from_process(self._environ)
        profile = detect_platform(env.variables)
        require_supported(profile)
        LOGGER.debug(f"Platform: {profile.bundle_name} (host {profile.host!r})")

        paths = InstallerPaths.for_home(env.home, env.variables)
        config = load_config(
            global_config_path=paths.config_file,
            cli_config_path=getattr(args, "config", None),
            environ=env.variables,
        )
        env.shell_profile = config.shell_profile or paths.default_shell_profile

        orchestrator = BootstrapOrchestrator.for_platform(
            profile,
            env=env,
            paths=paths,
            config=config,
            prompt=self._prompt,
            console=self._console,
        )
        orchestrator.run()
        return EXIT_SUCCESS
