"""Pinned versions of downloaded artifacts.

The source of truth is ``[tool.godspeed-installer.tools]`` in
pyproject.toml. Installed wheels do not ship that file, so the built-in
table below must be kept in step with it.
"""

from __future__ import annotations

import tomllib
from functools import lru_cache
from pathlib import Path
from typing import Dict, Optional

from godspeed_installer.core.logging import get_logger

LOGGER = get_logger(__name__)

BUILTIN_VERSIONS: Dict[str, str] = {
    "daemon": "1.1.2",
    "nvm": "0.39.7",
}

# src/godspeed_installer/bootstrap/versions.py -> repository root
PYPROJECT_PATH = Path(__file__).resolve().parents[3] / "pyproject.toml"


@lru_cache(maxsize=1)
def _pinned_versions() -> Dict[str, str]:
    versions = dict(BUILTIN_VERSIONS)
    if not PYPROJECT_PATH.is_file():
        return versions

    try:
        document = tomllib.loads(PYPROJECT_PATH.read_text(encoding="utf-8"))
    except (OSError, tomllib.TOMLDecodeError) as e:
        LOGGER.debug(f"Ignoring unreadable {PYPROJECT_PATH}: {e}")
        return versions

    table = document.get("tool", {}).get("godspeed-installer", {}).get("tools", {})
    versions.update((name, str(pinned)) for name, pinned in table.items())
    return versions


def get_tool_version(tool_name: str, default: Optional[str] = None) -> str:
    """Return the pinned version of an artifact such as 'daemon' or 'nvm'.

    Raises:
        KeyError: If the artifact is not pinned and no default is given.
    """
    versions = _pinned_versions()
    if tool_name in versions:
        return versions[tool_name]
    if default is not None:
        return default
    raise KeyError(f"No pinned version for {tool_name!r}; known: {sorted(versions)}")


def get_all_versions() -> Dict[str, str]:
    return dict(_pinned_versions())
