"""Colored operator output.

Installer progress is meant for the human at the terminal, so it is kept
separate from logging: cyan for progress, green for success, yellow for
warnings and red (on stderr) for errors.
"""

from __future__ import annotations

from typing import Optional, TextIO

from rich.console import Console as RichConsole
from rich.text import Text


class Console:
    """Thin wrapper around rich's Console with the installer's color scheme."""

    MESSAGE_STYLE = "cyan"
    SUCCESS_STYLE = "green"
    WARNING_STYLE = "bold yellow"
    ERROR_STYLE = "red"

    def __init__(
        self,
        file: Optional[TextIO] = None,
        err_file: Optional[TextIO] = None,
        color: bool = True,
    ) -> None:
        self._out = RichConsole(file=file, highlight=False, no_color=not color)
        self._err = RichConsole(
            file=err_file, stderr=err_file is None, highlight=False, no_color=not color
        )

    def _print(self, console: RichConsole, text: str, style: Optional[str]) -> None:
        # Text objects keep rich from interpreting [brackets] in paths and keys.
        console.print(Text(text, style=style or ""), soft_wrap=True)

    def message(self, text: str) -> None:
        self._print(self._out, text, self.MESSAGE_STYLE)

    def success(self, text: str) -> None:
        self._print(self._out, text, self.SUCCESS_STYLE)

    def warning(self, text: str) -> None:
        self._print(self._out, text, self.WARNING_STYLE)

    def error(self, text: str) -> None:
        self._print(self._err, text, self.ERROR_STYLE)

    def plain(self, text: str = "") -> None:
        self._print(self._out, text, None)
