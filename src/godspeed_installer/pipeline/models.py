"""Stage and pipeline results."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional


class StageOutcome(str, Enum):
    """What a stage did."""

    SKIPPED_ALREADY_PRESENT = "skipped_already_present"
    INSTALLED = "installed"
    FAILED = "failed"


@dataclass
class StageResult:
    """Result of running one stage.

    Attributes:
        stage_name: Stage identifier.
        outcome: What happened.
        version: Version reported by the tool after verification.
        details: Lines shown to the operator (versions, written paths).
        error: Failure message when outcome is FAILED.
    """

    stage_name: str
    outcome: StageOutcome
    version: Optional[str] = None
    details: List[str] = field(default_factory=list)
    error: Optional[str] = None


@dataclass
class PipelineResult:
    """Accumulated stage results for one run, in execution order."""

    results: List[StageResult] = field(default_factory=list)

    def add(self, result: StageResult) -> None:
        self.results.append(result)

    def stage_names(self, outcome: StageOutcome) -> List[str]:
        return [r.stage_name for r in self.results if r.outcome is outcome]

    @property
    def installed(self) -> List[str]:
        return self.stage_names(StageOutcome.INSTALLED)

    @property
    def skipped(self) -> List[str]:
        return self.stage_names(StageOutcome.SKIPPED_ALREADY_PRESENT)

    @property
    def failed(self) -> Optional[StageResult]:
        for result in self.results:
            if result.outcome is StageOutcome.FAILED:
                return result
        return None

    @property
    def succeeded(self) -> bool:
        return self.failed is None

    @property
    def versions(self) -> Dict[str, str]:
        return {r.stage_name: r.version for r in self.results if r.version}
