"""Explicit process environment threaded through installer stages.

Stages never touch ``os.environ`` or the user's shell profile directly;
they read and mutate an EnvironmentContext instead. Commands launched by
the CommandRunner inherit ``as_env()``, so a directory added to PATH here
is visible to every later stage of the same run.
"""

from __future__ import annotations

import os
import shutil
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterable, List, Mapping, Optional

from godspeed_installer.core.logging import get_logger

LOGGER = get_logger(__name__)

DEFAULT_SHELL_PROFILE_NAME = ".zshrc"


@dataclass
class EnvironmentContext:
    """Environment variables plus the shell profile they are persisted to.

    Attributes:
        variables: Mutable copy of the process environment.
        home: The user's home directory.
        shell_profile: Shell startup file that receives persistent exports.
    """

    variables: Dict[str, str]
    home: Path
    shell_profile: Path
    _persisted: List[str] = field(default_factory=list, repr=False)

    @classmethod
    def from_process(
        cls,
        environ: Optional[Mapping[str, str]] = None,
        shell_profile: Optional[Path] = None,
    ) -> "EnvironmentContext":
        """Snapshot the current process environment."""
        variables = dict(os.environ if environ is None else environ)
        home = Path(variables["HOME"]) if variables.get("HOME") else Path.home()
        profile = shell_profile or home / DEFAULT_SHELL_PROFILE_NAME
        return cls(variables=variables, home=home, shell_profile=profile)

    def get(self, name: str, default: Optional[str] = None) -> Optional[str]:
        return self.variables.get(name, default)

    def set(self, name: str, value: str) -> None:
        LOGGER.debug(f"Setting {name}={value} for this session")
        self.variables[name] = value

    @property
    def path_entries(self) -> List[str]:
        """PATH split into its directories, empty entries dropped."""
        raw = self.variables.get("PATH", "")
        return [entry for entry in raw.split(os.pathsep) if entry]

    def has_path_entry(self, directory: Path) -> bool:
        return str(directory) in self.path_entries

    def append_path(self, directory: Path) -> None:
        """Add a directory to the end of PATH unless already present."""
        if self.has_path_entry(directory):
            return
        self.variables["PATH"] = os.pathsep.join(self.path_entries + [str(directory)])

    def prepend_path(self, directory: Path) -> None:
        """Put a directory at the front of PATH, moving it if already present."""
        entries = [entry for entry in self.path_entries if entry != str(directory)]
        self.variables["PATH"] = os.pathsep.join([str(directory)] + entries)

    def which(self, name: str) -> Optional[Path]:
        """Locate an executable on this context's PATH."""
        found = shutil.which(name, path=self.variables.get("PATH", ""))
        return Path(found) if found else None

    def profile_contains(self, text: str) -> bool:
        if not self.shell_profile.exists():
            return False
        return text in self.shell_profile.read_text(encoding="utf-8", errors="replace")

    def persist_lines(self, lines: Iterable[str], marker: str) -> bool:
        """Append lines to the shell profile unless it already contains marker.

        Args:
            lines: Lines to append, without trailing newlines.
            marker: Text whose presence means the lines were added before.

        Returns:
            True if the profile was modified.
        """
        if self.profile_contains(marker):
            LOGGER.debug(f"{self.shell_profile} already contains {marker!r}")
            return False

        lines = list(lines)
        self.shell_profile.parent.mkdir(parents=True, exist_ok=True)
        existing = ""
        if self.shell_profile.exists():
            existing = self.shell_profile.read_text(encoding="utf-8", errors="replace")
        prefix = "" if not existing or existing.endswith("\n") else "\n"
        with open(self.shell_profile, "a", encoding="utf-8") as f:
            f.write(prefix + "".join(f"{line}\n" for line in lines))

        self._persisted.extend(lines)
        LOGGER.info(f"Added {len(lines)} line(s) to {self.shell_profile}")
        return True

    @property
    def persisted_lines(self) -> List[str]:
        """Lines written to the shell profile during this run."""
        return list(self._persisted)

    def as_env(self) -> Dict[str, str]:
        """Return a copy suitable for ``subprocess`` ``env=``."""
        return dict(self.variables)
