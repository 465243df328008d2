"""Bootstrap module for platform detection and binary management.

This module handles:
- Platform detection (OS + architecture)
- Per-platform install recipes
- User-scoped paths (~/.godspeed, ~/.local/bin, ~/.nvm)
- HTTPS downloads and binary validation
"""

from godspeed_installer.bootstrap.platform import detect_platform, PlatformProfile
from godspeed_installer.bootstrap.paths import get_godspeed_home, InstallerPaths
from godspeed_installer.bootstrap.recipes import resolve_recipe, PlatformRecipe
from godspeed_installer.bootstrap.validation import validate_tool, ToolStatus

__all__ = [
    "detect_platform",
    "PlatformProfile",
    "get_godspeed_home",
    "InstallerPaths",
    "resolve_recipe",
    "PlatformRecipe",
    "validate_tool",
    "ToolStatus",
]
