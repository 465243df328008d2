"""Credential capture for rag-node.

The key is asked for on every run and always overwrites the previous
.env file. Empty input is accepted.
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Optional, Protocol

import questionary
from questionary import Style

from godspeed_installer.core.console import Console
from godspeed_installer.core.errors import MissingPathError
from godspeed_installer.core.logging import get_logger
from godspeed_installer.pipeline.models import StageOutcome, StageResult
from godspeed_installer.pipeline.stages import Stage

LOGGER = get_logger(__name__)

ENV_FILE_NAME = ".env"

STYLE = Style([
    ("qmark", "fg:cyan bold"),
    ("question", "bold"),
    ("answer", "fg:cyan"),
])

PRIVACY_NOTICE = (
    "Note: This key will NOT be stored or sent to any server. "
    "It will only be written to a local .env file."
)


class SecretPrompt(Protocol):
    """Source of a secret value typed by the operator."""

    def ask(self, label: str) -> str:
        ...


class QuestionaryPrompt:
    """Masked terminal prompt, like a sudo password prompt."""

    def ask(self, label: str) -> str:
        # unsafe_ask lets Ctrl-C propagate instead of returning None.
        answer: Optional[str] = questionary.password(label, qmark="", style=STYLE).unsafe_ask()
        return answer or ""


def write_env_file(directory: Path, key: str, value: str) -> Path:
    """Replace directory/.env with a single ``KEY=value`` line."""
    env_file = directory / ENV_FILE_NAME
    env_file.write_text(f"{key}={value}\n", encoding="utf-8")
    LOGGER.info(f"Wrote {key} to {env_file}")
    return env_file


class SecretCaptureStage(Stage):
    """Prompt for an API key and write it into rag-node's directory.

    Args:
        resolve_dir: Returns the rag-node install directory.
        prompt: Where the secret comes from.
        env_key: Variable name written to the .env file.
    """

    def __init__(
        self,
        resolve_dir: Callable[[], Path],
        prompt: SecretPrompt,
        env_key: str,
    ) -> None:
        self._resolve_dir = resolve_dir
        self._prompt = prompt
        self.env_key = env_key

    @property
    def name(self) -> str:
        return "secrets"

    def run(self, console: Console) -> StageResult:
        console.message("Locating global rag-node installation directory...")
        target = self._resolve_dir()
        if not target.is_dir():
            raise MissingPathError(target, f"rag-node installation directory not found at {target}")

        console.plain()
        console.message(f"Enter your {self.env_key} for rag-node.")
        console.warning(PRIVACY_NOTICE)
        value = self._prompt.ask(f"{self.env_key}:")

        env_file = write_env_file(target, self.env_key, value)
        console.success(f".env file created at {env_file}")
        return StageResult(self.name, StageOutcome.INSTALLED, details=[str(env_file)])
