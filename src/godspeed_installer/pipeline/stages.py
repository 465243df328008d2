"""Pipeline stages.

A stage runs to completion or raises a BootstrapError; the orchestrator
never continues past a stage that raised.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from godspeed_installer.core.console import Console
from godspeed_installer.core.logging import get_logger
from godspeed_installer.pipeline.models import StageOutcome, StageResult
from godspeed_installer.tools.base import Tool

LOGGER = get_logger(__name__)


class Stage(ABC):
    """One step of the bootstrap pipeline."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Stage identifier."""

    @abstractmethod
    def run(self, console: Console) -> StageResult:
        """Execute the stage.

        Raises:
            BootstrapError: On any unrecoverable failure.
        """


class ToolStage(Stage):
    """Probe, install if missing, activate, then verify a single tool."""

    def __init__(self, tool: Tool) -> None:
        self.tool = tool

    @property
    def name(self) -> str:
        return self.tool.name

    def run(self, console: Console) -> StageResult:
        tool = self.tool
        console.message(f"Checking for {tool.display_name}...")

        if tool.probe():
            LOGGER.debug(f"{tool.name}: probe succeeded, skipping install")
            console.message(f"{tool.display_name} is already installed.")
            tool.on_present()
            outcome = StageOutcome.SKIPPED_ALREADY_PRESENT
        else:
            console.message(f"Installing {tool.display_name}...")
            tool.install()
            outcome = StageOutcome.INSTALLED

        tool.activate()

        if not tool.verify():
            raise tool.verification_error()

        for warning in tool.warnings():
            console.warning(warning)

        version = tool.version()
        details = tool.report(version)
        for line in details:
            console.success(line)
        if outcome is StageOutcome.INSTALLED and not details:
            console.success(f"{tool.display_name} installed successfully.")

        return StageResult(self.name, outcome, version=version, details=details)
