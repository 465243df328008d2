"""Installer configuration."""

from godspeed_installer.config.loader import ConfigError, load_config
from godspeed_installer.config.models import InstallerConfig

__all__ = ["ConfigError", "load_config", "InstallerConfig"]
