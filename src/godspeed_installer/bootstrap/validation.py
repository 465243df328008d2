"""Checks on installed binaries."""

from __future__ import annotations

import os
from enum import Enum
from pathlib import Path


class ToolStatus(str, Enum):
    """What was found at a binary's install location."""

    PRESENT = "present"
    MISSING = "missing"
    NOT_EXECUTABLE = "not_executable"


def validate_tool(path: Path) -> ToolStatus:
    """Classify the file at path.

    A file without the executable bit still counts as installed; callers
    decide whether that deserves a warning.
    """
    if not path.is_file():
        return ToolStatus.MISSING
    return ToolStatus.PRESENT if os.access(path, os.X_OK) else ToolStatus.NOT_EXECUTABLE
