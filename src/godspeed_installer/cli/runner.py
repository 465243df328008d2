"""CLI runner orchestration.

Parses arguments, configures logging and turns installer exceptions into
exit codes and operator-facing messages.
"""

from __future__ import annotations

from typing import Iterable, Mapping, Optional

from importlib.metadata import version, PackageNotFoundError

from godspeed_installer.cli.arguments import build_parser
from godspeed_installer.cli.commands.install import InstallCommand
from godspeed_installer.cli.exit_codes import (
    EXIT_BOOTSTRAP_FAILURE,
    EXIT_INTERRUPTED,
    EXIT_INVALID_USAGE,
    EXIT_SUCCESS,
)
from godspeed_installer.config.loader import ConfigError
from godspeed_installer.core.console import Console
from godspeed_installer.core.errors import BootstrapError
from godspeed_installer.core.logging import configure_logging, get_logger
from godspeed_installer.pipeline.credentials import SecretPrompt

LOGGER = get_logger(__name__)


def get_version() -> str:
    """Get installer version.

    Returns:
        Version string from package metadata or fallback.
    """
    try:
        return version("godspeed-installer")
    except PackageNotFoundError:
        # Fallback for editable installs that have not yet built metadata.
        from godspeed_installer import __version__
        return __version__


class CLIRunner:
    """Parses arguments and runs the install command."""

    def __init__(
        self,
        console: Optional[Console] = None,
        prompt: Optional[SecretPrompt] = None,
        environ: Optional[Mapping[str, str]] = None,
    ) -> None:
        self.parser = build_parser()
        self.console = console or Console()
        self._version = get_version()
        self.install_cmd = InstallCommand(self.console, prompt=prompt, environ=environ)

    def run(self, argv: Optional[Iterable[str]] = None) -> int:
        """Run the CLI.

        Args:
            argv: Command-line arguments (defaults to sys.argv).

        Returns:
            Exit code.
        """
        argv_list = list(argv) if argv is not None else None
        args = self.parser.parse_args(argv_list)

        configure_logging(
            debug=args.debug,
            verbose=args.verbose,
            quiet=args.quiet,
        )

        if args.version:
            print(self._version)
            return EXIT_SUCCESS

        try:
            return self.install_cmd.execute(args)
        except ConfigError as e:
            LOGGER.debug("Configuration error", exc_info=True)
            self.console.error(str(e))
            return EXIT_INVALID_USAGE
        except BootstrapError as e:
            if args.debug:
                LOGGER.exception("Installation failed")
            self.console.error(e.message)
            if e.hint:
                self.console.warning(e.hint)
            return EXIT_BOOTSTRAP_FAILURE
        except KeyboardInterrupt:
            self.console.error("\nInstallation interrupted.")
            return EXIT_INTERRUPTED
