"""Path management for the installer.

Resolves the ~/.godspeed directory and the other user-scoped locations
the installer reads or writes.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import ClassVar, Mapping, Optional

# Default directory name under user home
DEFAULT_HOME_DIR_NAME = ".godspeed"

# Environment variable to override the godspeed home directory
GODSPEED_HOME_ENV = "GODSPEED_HOME"


def get_godspeed_home(
    environ: Optional[Mapping[str, str]] = None,
    user_home: Optional[Path] = None,
) -> Path:
    """Get the godspeed home directory path.

    Resolution order:
    1. GODSPEED_HOME environment variable (if set)
    2. ~/.godspeed (default)

    Returns:
        Path to the godspeed home directory.
    """
    environ = os.environ if environ is None else environ
    env_home = environ.get(GODSPEED_HOME_ENV)
    if env_home:
        return Path(env_home)
    return (user_home or Path.home()) / DEFAULT_HOME_DIR_NAME


@dataclass
class InstallerPaths:
    """Locations used by the installer.

    Directory structure:
        ~/.godspeed/
            services.json    - Daemon service registrations (seeded once)
            installer.yml    - Optional installer configuration
        ~/.local/bin/        - Daemon binary on macOS
        ~/.nvm/              - NVM_DIR
    """

    user_home: Path
    godspeed_home: Path

    _SERVICES_FILE: ClassVar[str] = "services.json"
    _CONFIG_FILE: ClassVar[str] = "installer.yml"

    @classmethod
    def for_home(
        cls, user_home: Path, environ: Optional[Mapping[str, str]] = None
    ) -> "InstallerPaths":
        return cls(
            user_home=user_home,
            godspeed_home=get_godspeed_home(environ or {}, user_home=user_home),
        )

    @property
    def services_file(self) -> Path:
        """Daemon service registry seeded on first install."""
        return self.godspeed_home / self._SERVICES_FILE

    @property
    def config_file(self) -> Path:
        """Global installer configuration file."""
        return self.godspeed_home / self._CONFIG_FILE

    @property
    def user_bin_dir(self) -> Path:
        return self.user_home / ".local" / "bin"

    @property
    def nvm_dir(self) -> Path:
        return self.user_home / ".nvm"

    @property
    def default_shell_profile(self) -> Path:
        return self.user_home / ".zshrc"
