"""Per-platform install recipes.

Every OS and architecture decision the installer makes is looked up here
once, from the PlatformProfile, instead of being re-tested in each stage.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Optional, Tuple

from godspeed_installer.bootstrap.paths import InstallerPaths
from godspeed_installer.bootstrap.platform import Arch, OsKind, PlatformProfile
from godspeed_installer.core.errors import UnsupportedPlatformError

DAEMON_BINARY_NAME = "godspeed-daemon"
DAEMON_RELEASE_URL = "https://github.com/zero8dotdev/install-godspeed-daemon/releases/download"

_DAEMON_ASSETS: Dict[Tuple[OsKind, Arch], str] = {
    (OsKind.MACOS, Arch.ARM64): "godspeed-daemon-macos-arm64",
    (OsKind.MACOS, Arch.X86_64): "godspeed-daemon-macos",
    (OsKind.LINUX, Arch.ARM64): "godspeed-daemon-linux",
    (OsKind.LINUX, Arch.X86_64): "godspeed-daemon-linux",
}

_HOMEBREW_PREFIXES: Dict[Arch, Path] = {
    Arch.ARM64: Path("/opt/homebrew"),
    Arch.X86_64: Path("/usr/local"),
}

LINUX_SYSTEM_BIN = Path("/usr/local/bin")


@dataclass(frozen=True)
class PlatformRecipe:
    """Everything platform-specific the stages need.

    Attributes:
        package_install: Command prefix that installs a system package.
        package_refresh: Command run before package_install, if any.
        homebrew_prefix: Homebrew installation prefix (macOS only).
        nvm_loader: Script that defines the nvm shell function.
        daemon_url: Release artifact for this OS and architecture.
        daemon_dir: Directory the daemon binary is installed into.
        elevated: Whether writing daemon_dir needs sudo.
        set_executable: Whether the daemon gets the executable bit.
        persist_path: Whether daemon_dir is exported from the shell profile.
    """

    package_install: Tuple[str, ...]
    package_refresh: Optional[Tuple[str, ...]]
    homebrew_prefix: Optional[Path]
    nvm_loader: Path
    daemon_url: str
    daemon_dir: Path
    elevated: bool
    set_executable: bool
    persist_path: bool

    @property
    def daemon_path(self) -> Path:
        return self.daemon_dir / DAEMON_BINARY_NAME

    @property
    def daemon_mode(self) -> int:
        return 0o755 if self.set_executable else 0o644


def daemon_url(profile: PlatformProfile, version: str) -> str:
    """Return the release URL of the daemon build for a platform."""
    asset = _DAEMON_ASSETS.get((profile.os_kind, profile.arch))
    if asset is None:
        raise UnsupportedPlatformError(
            f"No godspeed-daemon build for {profile.bundle_name}"
        )
    return f"{DAEMON_RELEASE_URL}/v{version}/{asset}"


def resolve_recipe(
    profile: PlatformProfile,
    paths: InstallerPaths,
    daemon_version: str,
    set_executable: Optional[bool] = None,
) -> PlatformRecipe:
    """Resolve the recipe for a platform.

    Args:
        profile: Detected platform.
        paths: User-scoped installer paths.
        daemon_version: Daemon release to download.
        set_executable: Override the platform's executable-bit policy for
            the daemon binary; None keeps the platform default.

    Returns:
        The PlatformRecipe.

    Raises:
        UnsupportedPlatformError: If the platform is not macOS or Linux.
    """
    url = daemon_url(profile, daemon_version)

    if profile.os_kind is OsKind.MACOS:
        prefix = _HOMEBREW_PREFIXES[profile.arch]
        return PlatformRecipe(
            package_install=("brew", "install"),
            package_refresh=None,
            homebrew_prefix=prefix,
            nvm_loader=prefix / "opt" / "nvm" / "nvm.sh",
            daemon_url=url,
            daemon_dir=paths.user_bin_dir,
            elevated=False,
            set_executable=True if set_executable is None else set_executable,
            persist_path=True,
        )

    # Linux leaves the daemon without the executable bit unless configured.
    return PlatformRecipe(
        package_install=("sudo", "apt-get", "install", "-y"),
        package_refresh=("sudo", "apt-get", "update"),
        homebrew_prefix=None,
        nvm_loader=paths.nvm_dir / "nvm.sh",
        daemon_url=url,
        daemon_dir=LINUX_SYSTEM_BIN,
        elevated=True,
        set_executable=False if set_executable is None else set_executable,
        persist_path=False,
    )
