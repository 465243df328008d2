"""Tests for per-platform recipes."""

from __future__ import annotations

from pathlib import Path

import pytest

from godspeed_installer.bootstrap.paths import InstallerPaths
from godspeed_installer.bootstrap.platform import Arch, OsKind, PlatformProfile
from godspeed_installer.bootstrap.recipes import (
    DAEMON_RELEASE_URL,
    LINUX_SYSTEM_BIN,
    daemon_url,
    resolve_recipe,
)
from godspeed_installer.core.errors import UnsupportedPlatformError


@pytest.fixture
def installer_paths(tmp_path: Path) -> InstallerPaths:
    return InstallerPaths.for_home(tmp_path)


class TestDaemonUrl:
    @pytest.mark.parametrize(
        "os_kind,arch,asset",
        [
            (OsKind.MACOS, Arch.ARM64, "godspeed-daemon-macos-arm64"),
            (OsKind.MACOS, Arch.X86_64, "godspeed-daemon-macos"),
            (OsKind.LINUX, Arch.X86_64, "godspeed-daemon-linux"),
            (OsKind.LINUX, Arch.ARM64, "godspeed-daemon-linux"),
        ],
    )
    def test_asset_per_platform(self, os_kind: OsKind, arch: Arch, asset: str) -> None:
        url = daemon_url(PlatformProfile(os_kind, arch), "1.1.2")
        assert url == f"{DAEMON_RELEASE_URL}/v1.1.2/{asset}"

    def test_unsupported_raises(self) -> None:
        with pytest.raises(UnsupportedPlatformError):
            daemon_url(PlatformProfile(OsKind.UNSUPPORTED, Arch.X86_64), "1.1.2")


class TestResolveRecipe:
    def test_macos_arm(self, installer_paths: InstallerPaths) -> None:
        recipe = resolve_recipe(PlatformProfile(OsKind.MACOS, Arch.ARM64), installer_paths, "1.1.2")

        assert recipe.package_install == ("brew", "install")
        assert recipe.package_refresh is None
        assert recipe.homebrew_prefix == Path("/opt/homebrew")
        assert recipe.nvm_loader == Path("/opt/homebrew/opt/nvm/nvm.sh")
        assert recipe.daemon_dir == installer_paths.user_bin_dir
        assert recipe.daemon_path == installer_paths.user_bin_dir / "godspeed-daemon"
        assert recipe.elevated is False
        assert recipe.set_executable is True
        assert recipe.daemon_mode == 0o755
        assert recipe.persist_path is True

    def test_macos_intel_uses_usr_local_prefix(self, installer_paths: InstallerPaths) -> None:
        recipe = resolve_recipe(PlatformProfile(OsKind.MACOS, Arch.X86_64), installer_paths, "1.1.2")
        assert recipe.homebrew_prefix == Path("/usr/local")
        assert recipe.daemon_url.endswith("/godspeed-daemon-macos")

    def test_linux(self, installer_paths: InstallerPaths) -> None:
        recipe = resolve_recipe(PlatformProfile(OsKind.LINUX, Arch.X86_64), installer_paths, "1.1.2")

        assert recipe.package_install == ("sudo", "apt-get", "install", "-y")
        assert recipe.package_refresh == ("sudo", "apt-get", "update")
        assert recipe.homebrew_prefix is None
        assert recipe.nvm_loader == installer_paths.nvm_dir / "nvm.sh"
        assert recipe.daemon_dir == LINUX_SYSTEM_BIN
        assert recipe.elevated is True
        assert recipe.persist_path is False

    def test_linux_leaves_executable_bit_unset_by_default(
        self, installer_paths: InstallerPaths
    ) -> None:
        recipe = resolve_recipe(PlatformProfile(OsKind.LINUX, Arch.X86_64), installer_paths, "1.1.2")
        assert recipe.set_executable is False
        assert recipe.daemon_mode == 0o644

    def test_executable_override(self, installer_paths: InstallerPaths) -> None:
        recipe = resolve_recipe(
            PlatformProfile(OsKind.LINUX, Arch.X86_64),
            installer_paths,
            "1.1.2",
            set_executable=True,
        )
        assert recipe.daemon_mode == 0o755

    def test_version_in_url(self, installer_paths: InstallerPaths) -> None:
        recipe = resolve_recipe(PlatformProfile(OsKind.LINUX, Arch.X86_64), installer_paths, "2.0.0")
        assert "/v2.0.0/" in recipe.daemon_url

    def test_unsupported_raises(self, installer_paths: InstallerPaths) -> None:
        with pytest.raises(UnsupportedPlatformError, match="No godspeed-daemon build"):
            resolve_recipe(PlatformProfile(OsKind.UNSUPPORTED, Arch.X86_64), installer_paths, "1.1.2")
