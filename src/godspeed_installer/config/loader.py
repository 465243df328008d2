"""Installer configuration loading.

Two optional YAML layers feed the installer, lowest precedence first:

- ``~/.godspeed/installer.yml`` (or ``$GODSPEED_HOME/installer.yml``)
- the file passed with ``--config``

String values may reference environment variables as ``${VAR}`` or
``${VAR:-fallback}``. Layers are validated one by one and then merged key
by key, so a custom file only needs the settings it changes.
"""

from __future__ import annotations

import os
import re
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Tuple

import yaml

from godspeed_installer.config.models import (
    DaemonConfig,
    InstallerConfig,
    PackagesConfig,
    SecretsConfig,
    VersionsConfig,
)
from godspeed_installer.config.validation import (
    SECTION_SCHEMAS,
    ValidationSeverity,
    has_errors,
    validate_config,
)
from godspeed_installer.core.logging import get_logger

LOGGER = get_logger(__name__)

# ${NAME} or ${NAME:-fallback}
ENV_VAR_PATTERN = re.compile(r"\$\{([^}:]+)(?::-([^}]*))?\}")


class ConfigError(Exception):
    """The installer configuration cannot be read or is invalid."""


def load_config(
    global_config_path: Optional[Path] = None,
    cli_config_path: Optional[Path] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> InstallerConfig:
    """Build the effective configuration.

    Args:
        global_config_path: Global config file; ignored when it does not exist.
        cli_config_path: File given with ``--config``; must exist.
        environ: Variables for ``${VAR}`` expansion (defaults to os.environ).

    Returns:
        InstallerConfig with defaults for everything not configured.

    Raises:
        ConfigError: If the ``--config`` file is missing, or any layer is not
            valid YAML or has values of the wrong type.
    """
    layers: List[Tuple[str, Path]] = []
    if global_config_path is not None and global_config_path.exists():
        layers.append(("global", global_config_path))
    if cli_config_path is not None:
        if not cli_config_path.exists():
            raise ConfigError(f"Config file not found: {cli_config_path}")
        layers.append(("custom", cli_config_path))

    merged: Dict[str, Any] = {}
    sources: List[str] = []
    for label, path in layers:
        merged = merge_configs(merged, _read_layer(path, environ))
        sources.append(f"{label}:{path}")
        LOGGER.debug(f"Using {label} config {path}")

    config = dict_to_config(merged)
    config._config_sources = sources
    return config


def _read_layer(path: Path, environ: Optional[Mapping[str, str]]) -> Dict[str, Any]:
    try:
        data = load_yaml_file(path, environ)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    issues = validate_config(data, source=str(path))
    if has_errors(issues):
        errors = [str(i) for i in issues if i.severity is ValidationSeverity.ERROR]
        raise ConfigError("Invalid configuration: " + "; ".join(errors))
    return data


def load_yaml_file(path: Path, environ: Optional[Mapping[str, str]] = None) -> Dict[str, Any]:
    """Parse one YAML config file and expand variables in its strings.

    An empty file is an empty mapping.

    Raises:
        yaml.YAMLError: If the file is not valid YAML.
        ConfigError: If the top level is not a mapping.
    """
    data = yaml.safe_load(path.read_text(encoding="utf-8"))
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Config file must be a YAML mapping, got {type(data).__name__}")
    return expand_env_vars(data, os.environ if environ is None else environ)


def expand_env_vars(data: Any, environ: Mapping[str, str]) -> Any:
    """Expand ``${VAR}`` references in every string nested inside data."""
    if isinstance(data, str):
        return ENV_VAR_PATTERN.sub(lambda m: _env_var_replacer(m, environ), data)
    if isinstance(data, dict):
        return {key: expand_env_vars(value, environ) for key, value in data.items()}
    if isinstance(data, list):
        return [expand_env_vars(item, environ) for item in data]
    return data


def _env_var_replacer(match: re.Match[str], environ: Mapping[str, str]) -> str:
    name, fallback = match.group(1), match.group(2)
    if name in environ:
        return environ[name]
    if fallback is not None:
        return fallback
    LOGGER.warning(f"Environment variable ${name} is not set and has no default")
    return ""


def merge_configs(base: Dict[str, Any], overlay: Dict[str, Any]) -> Dict[str, Any]:
    """Return base updated by overlay; nested mappings merge, anything else is replaced."""
    merged = dict(base)
    for key, value in overlay.items():
        current = merged.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            merged[key] = merge_configs(current, value)
        else:
            merged[key] = value
    return merged


def _section(data: Dict[str, Any], name: str) -> Dict[str, Any]:
    # Unknown keys were already warned about; explicit nulls mean "use the default".
    known = SECTION_SCHEMAS[name]
    return {
        key: value
        for key, value in (data.get(name) or {}).items()
        if key in known and value is not None
    }


def dict_to_config(data: Dict[str, Any]) -> InstallerConfig:
    """Convert a merged configuration mapping to InstallerConfig."""
    shell_profile = data.get("shell_profile")
    return InstallerConfig(
        shell_profile=Path(shell_profile).expanduser() if shell_profile else None,
        versions=VersionsConfig(**{k: str(v) for k, v in _section(data, "versions").items()}),
        packages=PackagesConfig(**_section(data, "packages")),
        daemon=DaemonConfig(**_section(data, "daemon")),
        secrets=SecretsConfig(**_section(data, "secrets")),
    )
