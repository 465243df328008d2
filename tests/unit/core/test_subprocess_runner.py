"""Tests for CommandRunner."""

from __future__ import annotations

import subprocess
from unittest.mock import patch

import pytest

from godspeed_installer.core.environment import EnvironmentContext
from godspeed_installer.core.errors import CommandError
from godspeed_installer.core.subprocess_runner import CommandRunner, format_command


def _completed(returncode: int = 0, stdout: str = "", stderr: str = "") -> subprocess.CompletedProcess:
    return subprocess.CompletedProcess(["x"], returncode, stdout, stderr)


class TestCommandRunner:
    def test_passes_context_environment(self, env: EnvironmentContext) -> None:
        runner = CommandRunner(env)
        with patch("subprocess.run", return_value=_completed()) as mock_run:
            runner.run(["git", "--version"])

        kwargs = mock_run.call_args.kwargs
        assert kwargs["env"] == env.as_env()
        assert kwargs["timeout"] is None
        assert kwargs["capture_output"] is False

    def test_environment_changes_are_visible_to_later_commands(
        self, env: EnvironmentContext, tmp_path
    ) -> None:
        runner = CommandRunner(env)
        env.append_path(tmp_path / "late")
        with patch("subprocess.run", return_value=_completed()) as mock_run:
            runner.run(["node", "-v"])

        assert str(tmp_path / "late") in mock_run.call_args.kwargs["env"]["PATH"]

    def test_nonzero_raises(self, env: EnvironmentContext) -> None:
        runner = CommandRunner(env)
        with patch("subprocess.run", return_value=_completed(2, stderr="boom")):
            with pytest.raises(CommandError) as exc_info:
                runner.run(["npm", "install", "-g", "x"], capture=True)

        assert exc_info.value.returncode == 2
        assert "boom" in exc_info.value.message
        assert exc_info.value.cmd == ["npm", "install", "-g", "x"]

    def test_nonzero_without_check(self, env: EnvironmentContext) -> None:
        runner = CommandRunner(env)
        with patch("subprocess.run", return_value=_completed(1)):
            result = runner.run(["false"], check=False)
        assert result.returncode == 1

    def test_missing_executable_raises_command_error(self, env: EnvironmentContext) -> None:
        runner = CommandRunner(env)
        with patch("subprocess.run", side_effect=FileNotFoundError("corepack")):
            with pytest.raises(CommandError) as exc_info:
                runner.run(["corepack", "enable"])
        assert exc_info.value.returncode == 127

    def test_missing_executable_without_check(self, env: EnvironmentContext) -> None:
        runner = CommandRunner(env)
        with patch("subprocess.run", side_effect=FileNotFoundError("brew")):
            assert runner.succeeds(["brew", "--version"]) is False

    def test_output_strips(self, env: EnvironmentContext) -> None:
        runner = CommandRunner(env)
        with patch("subprocess.run", return_value=_completed(stdout="/usr/local\n")):
            assert runner.output(["npm", "prefix", "-g"]) == "/usr/local"

    def test_shell_uses_bash(self, env: EnvironmentContext) -> None:
        runner = CommandRunner(env)
        with patch("subprocess.run", return_value=_completed()) as mock_run:
            runner.shell("nvm --version")
        assert mock_run.call_args.args[0] == ["bash", "-c", "nvm --version"]


class TestFormatCommand:
    def test_quotes_arguments(self) -> None:
        assert format_command(["bash", "-c", "a && b"]) == "bash -c 'a && b'"
