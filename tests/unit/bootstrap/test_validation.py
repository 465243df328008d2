"""Tests for binary validation."""

from __future__ import annotations

from pathlib import Path

from godspeed_installer.bootstrap.validation import ToolStatus, validate_tool


class TestValidateTool:
    def test_missing(self, tmp_path: Path) -> None:
        assert validate_tool(tmp_path / "nope") is ToolStatus.MISSING

    def test_directory_is_missing(self, tmp_path: Path) -> None:
        assert validate_tool(tmp_path) is ToolStatus.MISSING

    def test_not_executable(self, tmp_path: Path) -> None:
        binary = tmp_path / "tool"
        binary.write_text("data")
        binary.chmod(0o644)
        assert validate_tool(binary) is ToolStatus.NOT_EXECUTABLE

    def test_present(self, tmp_path: Path) -> None:
        binary = tmp_path / "tool"
        binary.write_text("#!/bin/sh\n")
        binary.chmod(0o755)
        assert validate_tool(binary) is ToolStatus.PRESENT
