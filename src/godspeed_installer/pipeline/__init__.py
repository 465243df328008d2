"""Bootstrap pipeline: stages and the orchestrator that runs them."""

from godspeed_installer.pipeline.executor import BootstrapOrchestrator, default_stages
from godspeed_installer.pipeline.models import PipelineResult, StageOutcome, StageResult

__all__ = [
    "BootstrapOrchestrator",
    "default_stages",
    "PipelineResult",
    "StageOutcome",
    "StageResult",
]
