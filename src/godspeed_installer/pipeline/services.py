"""Daemon service registry seeding."""

from __future__ import annotations

from pathlib import Path

from godspeed_installer.core.console import Console
from godspeed_installer.core.logging import get_logger
from godspeed_installer.pipeline.models import StageOutcome, StageResult
from godspeed_installer.pipeline.stages import Stage

LOGGER = get_logger(__name__)

DEFAULT_SERVICES_JSON = '{ "services": [] }\n'


def seed_services_file(path: Path) -> bool:
    """Write the default services document unless the file already exists.

    Returns:
        True if the file was created.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    if path.exists():
        LOGGER.debug(f"{path} already exists, leaving it untouched")
        return False
    path.write_text(DEFAULT_SERVICES_JSON, encoding="utf-8")
    LOGGER.info(f"Created {path}")
    return True


class ServicesConfigStage(Stage):
    def __init__(self, services_file: Path) -> None:
        self.services_file = services_file

    @property
    def name(self) -> str:
        return "services-config"

    def run(self, console: Console) -> StageResult:
        if seed_services_file(self.services_file):
            console.success(f"Created daemon config at {self.services_file}")
            outcome = StageOutcome.INSTALLED
        else:
            console.message(f"Daemon config already present at {self.services_file}")
            outcome = StageOutcome.SKIPPED_ALREADY_PRESENT
        return StageResult(self.name, outcome, details=[str(self.services_file)])
