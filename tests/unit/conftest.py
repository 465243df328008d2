"""Shared fixtures for unit tests.

Nothing here runs real installers: commands go through FakeRunner and
every path lives under tmp_path.
"""

from __future__ import annotations

import io
import subprocess
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, List, Optional, Sequence

import pytest

from godspeed_installer.bootstrap.paths import InstallerPaths
from godspeed_installer.bootstrap.platform import Arch, OsKind, PlatformProfile
from godspeed_installer.bootstrap.recipes import PlatformRecipe
from godspeed_installer.config.models import InstallerConfig, VersionsConfig
from godspeed_installer.core.console import Console
from godspeed_installer.core.environment import EnvironmentContext
from godspeed_installer.core.errors import CommandError
from godspeed_installer.core.subprocess_runner import CommandRunner
from godspeed_installer.tools.base import ToolContext

MACOS_ARM = PlatformProfile(OsKind.MACOS, Arch.ARM64, "darwin23")
MACOS_INTEL = PlatformProfile(OsKind.MACOS, Arch.X86_64, "darwin23")
LINUX = PlatformProfile(OsKind.LINUX, Arch.X86_64, "linux-gnu")
UNSUPPORTED = PlatformProfile(OsKind.UNSUPPORTED, Arch.X86_64, "msys")


def make_executable(directory: Path, name: str) -> Path:
    """Create an executable stub that shutil.which can find."""
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / name
    path.write_text("#!/bin/sh\nexit 0\n")
    path.chmod(0o755)
    return path


@dataclass
class _Rule:
    fragment: str
    stdout: str = ""
    returncode: int = 0
    effect: Optional[Callable[[], None]] = None


class FakeRunner(CommandRunner):
    """CommandRunner that records commands instead of running them.

    Rules match when their fragment appears in the space-joined command;
    the first registered match wins. Unmatched commands succeed silently.
    """

    def __init__(self, env: EnvironmentContext) -> None:
        super().__init__(env)
        self.calls: List[List[str]] = []
        self._rules: List[_Rule] = []

    def on(
        self,
        fragment: str,
        stdout: str = "",
        returncode: int = 0,
        effect: Optional[Callable[[], None]] = None,
    ) -> "FakeRunner":
        self._rules.append(_Rule(fragment, stdout, returncode, effect))
        return self

    def run(
        self,
        cmd: Sequence[str],
        *,
        capture: bool = False,
        check: bool = True,
        cwd=None,
    ) -> subprocess.CompletedProcess:
        argv = [str(part) for part in cmd]
        self.calls.append(argv)
        joined = " ".join(argv)
        rule = next((r for r in self._rules if r.fragment in joined), _Rule(""))
        if rule.effect is not None:
            rule.effect()
        if check and rule.returncode != 0:
            raise CommandError(argv, rule.returncode)
        return subprocess.CompletedProcess(argv, rule.returncode, rule.stdout, "")

    def ran(self, fragment: str) -> bool:
        return any(fragment in " ".join(call) for call in self.calls)


class CannedPrompt:
    """SecretPrompt returning a fixed answer."""

    def __init__(self, answer: str = "") -> None:
        self.answer = answer
        self.labels: List[str] = []

    def ask(self, label: str) -> str:
        self.labels.append(label)
        return self.answer


@dataclass
class ConsoleCapture:
    out: io.StringIO = field(default_factory=io.StringIO)
    err: io.StringIO = field(default_factory=io.StringIO)

    def __post_init__(self) -> None:
        self.console = Console(file=self.out, err_file=self.err, color=False)

    @property
    def stdout(self) -> str:
        return self.out.getvalue()

    @property
    def stderr(self) -> str:
        return self.err.getvalue()


@pytest.fixture
def capture() -> ConsoleCapture:
    return ConsoleCapture()


@pytest.fixture
def user_home(tmp_path: Path) -> Path:
    home = tmp_path / "home"
    home.mkdir()
    return home


@pytest.fixture
def bin_dir(tmp_path: Path) -> Path:
    path = tmp_path / "bin"
    path.mkdir()
    return path


@pytest.fixture
def env(user_home: Path, bin_dir: Path) -> EnvironmentContext:
    return EnvironmentContext(
        variables={"HOME": str(user_home), "PATH": str(bin_dir)},
        home=user_home,
        shell_profile=user_home / ".zshrc",
    )


@pytest.fixture
def paths(user_home: Path) -> InstallerPaths:
    return InstallerPaths(user_home=user_home, godspeed_home=user_home / ".godspeed")


@pytest.fixture
def runner(env: EnvironmentContext) -> FakeRunner:
    return FakeRunner(env)


@pytest.fixture
def config() -> InstallerConfig:
    return InstallerConfig(versions=VersionsConfig(daemon="1.1.2", nvm="0.39.7"))


@pytest.fixture
def make_recipe(tmp_path: Path, paths: InstallerPaths) -> Callable[..., PlatformRecipe]:
    """Build recipes whose filesystem locations all live under tmp_path."""

    def _make(profile: PlatformProfile = MACOS_ARM, **overrides) -> PlatformRecipe:
        macos = profile.os_kind is OsKind.MACOS
        prefix = tmp_path / "homebrew"
        values = dict(
            package_install=("brew", "install") if macos else ("sudo", "apt-get", "install", "-y"),
            package_refresh=None if macos else ("sudo", "apt-get", "update"),
            homebrew_prefix=prefix if macos else None,
            nvm_loader=(prefix / "opt" / "nvm" / "nvm.sh") if macos else paths.nvm_dir / "nvm.sh",
            daemon_url="https://github.com/zero8dotdev/install-godspeed-daemon/releases/download/v1.1.2/godspeed-daemon-linux",
            daemon_dir=paths.user_bin_dir if macos else tmp_path / "usr-local-bin",
            elevated=not macos,
            set_executable=macos,
            persist_path=macos,
        )
        values.update(overrides)
        return PlatformRecipe(**values)

    return _make


@pytest.fixture
def make_context(
    env: EnvironmentContext,
    paths: InstallerPaths,
    runner: FakeRunner,
    config: InstallerConfig,
    make_recipe: Callable[..., PlatformRecipe],
) -> Callable[..., ToolContext]:
    def _make(profile: PlatformProfile = MACOS_ARM, **recipe_overrides) -> ToolContext:
        return ToolContext(
            profile=profile,
            recipe=make_recipe(profile, **recipe_overrides),
            paths=paths,
            env=env,
            runner=runner,
            config=config,
        )

    return _make
