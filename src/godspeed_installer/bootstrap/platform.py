"""Platform detection for the installer.

Classifies the host into macOS, Linux or unsupported, plus the CPU
architecture that selects Homebrew prefixes and daemon artifacts.
"""

from __future__ import annotations

import os
import platform
import sys
from dataclasses import dataclass
from enum import Enum
from typing import Mapping, Optional

# Shell variable naming the OS, e.g. "darwin23" or "linux-gnu"
OSTYPE_ENV = "OSTYPE"


class OsKind(str, Enum):
    """Operating system family."""

    MACOS = "macos"
    LINUX = "linux"
    UNSUPPORTED = "unsupported"


class Arch(str, Enum):
    """CPU architecture."""

    ARM64 = "arm64"
    X86_64 = "x86_64"


_ARM_MACHINES = frozenset({"arm64", "aarch64"})


def classify_os(host: str) -> OsKind:
    """Classify a host-identifying string.

    Accepts shell ``OSTYPE`` values (``darwin22.0``, ``linux-gnu``) as well
    as ``sys.platform`` values (``darwin``, ``linux``).

    Args:
        host: Host-identifying string.

    Returns:
        The matching OsKind; never raises.
    """
    host = host.strip().lower()
    if host.startswith("darwin"):
        return OsKind.MACOS
    if host.startswith("linux-gnu") or host == "linux":
        return OsKind.LINUX
    return OsKind.UNSUPPORTED


def normalize_arch(machine: str) -> Arch:
    """Map a raw machine string to an Arch; anything not ARM is x86_64."""
    if machine.strip().lower() in _ARM_MACHINES:
        return Arch.ARM64
    return Arch.X86_64


def host_identifier(environ: Optional[Mapping[str, str]] = None) -> str:
    """Return OSTYPE when exported, otherwise the interpreter's platform."""
    environ = os.environ if environ is None else environ
    return environ.get(OSTYPE_ENV) or sys.platform


@dataclass(frozen=True)
class PlatformProfile:
    """Immutable description of the machine being bootstrapped.

    Attributes:
        os_kind: Operating system family.
        arch: CPU architecture.
        host: The raw string the OS was classified from.
    """

    os_kind: OsKind
    arch: Arch
    host: str = ""

    @property
    def is_supported(self) -> bool:
        return self.os_kind is not OsKind.UNSUPPORTED

    @property
    def is_macos(self) -> bool:
        return self.os_kind is OsKind.MACOS

    @property
    def is_linux(self) -> bool:
        return self.os_kind is OsKind.LINUX

    @property
    def label(self) -> str:
        """Human-readable name, e.g. "macOS" or "Linux"."""
        return {
            OsKind.MACOS: "macOS",
            OsKind.LINUX: "Linux",
        }.get(self.os_kind, self.host or "unknown")

    @property
    def bundle_name(self) -> str:
        """Return e.g. "macos-arm64" or "linux-x86_64"."""
        return f"{self.os_kind.value}-{self.arch.value}"


def detect_platform(
    environ: Optional[Mapping[str, str]] = None,
    machine: Optional[str] = None,
) -> PlatformProfile:
    """Detect the current platform.

    Args:
        environ: Environment to read OSTYPE from (defaults to os.environ).
        machine: Raw machine string (defaults to platform.machine()).

    Returns:
        PlatformProfile; unsupported hosts are reported, not raised.
    """
    host = host_identifier(environ)
    return PlatformProfile(
        os_kind=classify_os(host),
        arch=normalize_arch(machine if machine is not None else platform.machine()),
        host=host,
    )
