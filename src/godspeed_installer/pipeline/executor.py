"""Bootstrap orchestrator.

Runs the installer stages strictly in order on one thread. The first
stage that raises aborts the run; nothing is retried or rolled back.
"""

from __future__ import annotations

from typing import List, Optional

from godspeed_installer.bootstrap.paths import InstallerPaths
from godspeed_installer.bootstrap.platform import PlatformProfile
from godspeed_installer.bootstrap.recipes import DAEMON_BINARY_NAME, resolve_recipe
from godspeed_installer.config.models import InstallerConfig
from godspeed_installer.core.console import Console
from godspeed_installer.core.environment import EnvironmentContext
from godspeed_installer.core.errors import BootstrapError, UnsupportedPlatformError
from godspeed_installer.core.logging import get_logger
from godspeed_installer.core.subprocess_runner import CommandRunner
from godspeed_installer.pipeline.credentials import SecretCaptureStage, SecretPrompt
from godspeed_installer.pipeline.models import PipelineResult, StageOutcome, StageResult
from godspeed_installer.pipeline.services import ServicesConfigStage
from godspeed_installer.pipeline.stages import Stage, ToolStage
from godspeed_installer.tools import (
    DaemonTool,
    GitTool,
    GodspeedCliTool,
    HomebrewTool,
    NodeTool,
    NvmTool,
    PnpmTool,
    RagNodeTool,
    ToolContext,
)

LOGGER = get_logger(__name__)

RESTART_NOTICE = "Installation complete! Please restart your terminal for all changes to apply."


def require_supported(profile: PlatformProfile) -> None:
    """Raise UnsupportedPlatformError unless the profile is macOS or Linux."""
    if not profile.is_supported:
        raise UnsupportedPlatformError(f"Unsupported operating system: {profile.host}")


def build_tool_context(
    profile: PlatformProfile,
    env: EnvironmentContext,
    paths: InstallerPaths,
    config: InstallerConfig,
    runner: Optional[CommandRunner] = None,
) -> ToolContext:
    """Resolve the platform recipe once and bundle it with the shared state."""
    require_supported(profile)
    recipe = resolve_recipe(
        profile,
        paths,
        daemon_version=config.versions.daemon,
        set_executable=config.daemon.set_executable,
    )
    return ToolContext(
        profile=profile,
        recipe=recipe,
        paths=paths,
        env=env,
        runner=runner or CommandRunner(env),
        config=config,
    )


def default_stages(context: ToolContext, prompt: SecretPrompt) -> List[Stage]:
    """The installer pipeline, in execution order."""
    nvm = NvmTool(context)
    rag_node = RagNodeTool(context)
    tools = [
        HomebrewTool(context),
        nvm,
        NodeTool(context, nvm),
        PnpmTool(context),
        GitTool(context),
        GodspeedCliTool(context),
        DaemonTool(context),
    ]

    stages: List[Stage] = [ToolStage(tool) for tool in tools if tool.supports(context.profile)]
    stages.append(ServicesConfigStage(context.paths.services_file))
    stages.append(ToolStage(rag_node))
    stages.append(
        SecretCaptureStage(rag_node.install_dir, prompt, context.config.secrets.env_key)
    )
    return stages


class BootstrapOrchestrator:
    """Executes the bootstrap pipeline for one machine."""

    def __init__(
        self,
        profile: PlatformProfile,
        stages: List[Stage],
        console: Optional[Console] = None,
    ) -> None:
        self.profile = profile
        self.stages = stages
        self.console = console or Console()
        self.result = PipelineResult()

    @classmethod
    def for_platform(
        cls,
        profile: PlatformProfile,
        env: EnvironmentContext,
        paths: InstallerPaths,
        config: InstallerConfig,
        prompt: SecretPrompt,
        console: Optional[Console] = None,
        runner: Optional[CommandRunner] = None,
    ) -> "BootstrapOrchestrator":
        """Build an orchestrator with the default stages.

        Raises:
            UnsupportedPlatformError: Before anything else is resolved.
        """
        context = build_tool_context(profile, env, paths, config, runner=runner)
        return cls(profile, default_stages(context, prompt), console=console)

    def run(self) -> PipelineResult:
        """Run every stage in order.

        Returns:
            The accumulated results.

        Raises:
            BootstrapError: The first failure; its stage is recorded as failed
                and no later stage runs.
        """
        require_supported(self.profile)
        self.console.message(f"Detected {self.profile.label} system")
        self.console.message("Starting Godspeed Full Installation...")

        for stage in self.stages:
            LOGGER.info(f"Running stage {stage.name}")
            try:
                stage_result = stage.run(self.console)
            except BootstrapError as e:
                LOGGER.debug(f"Stage {stage.name} failed: {e.message}")
                self.result.add(StageResult(stage.name, StageOutcome.FAILED, error=e.message))
                raise
            LOGGER.info(f"Stage {stage.name}: {stage_result.outcome.value}")
            self.result.add(stage_result)

        self._print_summary()
        return self.result

    def _print_summary(self) -> None:
        console = self.console
        console.plain()
        console.success("Installation summary:")
        for stage_result in self.result.results:
            status = (
                "already present"
                if stage_result.outcome is StageOutcome.SKIPPED_ALREADY_PRESENT
                else "done"
            )
            version = f" ({stage_result.version})" if stage_result.version else ""
            console.plain(f"  {stage_result.stage_name}: {status}{version}")

        if DAEMON_BINARY_NAME in {r.stage_name for r in self.result.results}:
            console.plain()
            console.message("To use the Godspeed daemon, run:")
            console.plain(f"  {DAEMON_BINARY_NAME}")

        cli_version = self.result.versions.get("godspeed")
        if cli_version:
            console.success(f"Godspeed CLI version: {cli_version}")
        console.success(RESTART_NOTICE)
