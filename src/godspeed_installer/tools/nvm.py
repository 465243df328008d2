"""NVM, the Node version manager.

nvm is a shell function rather than an executable, so every nvm call is
made through ``bash -c`` after sourcing the loader script.
"""

from __future__ import annotations

import shlex
import subprocess
import tempfile
from pathlib import Path
from typing import List, Optional

from godspeed_installer.bootstrap.download import download_file
from godspeed_installer.core.errors import DependencyLoadError
from godspeed_installer.core.logging import get_logger
from godspeed_installer.tools.base import Tool

LOGGER = get_logger(__name__)

NVM_DIR_ENV = "NVM_DIR"
NVM_INSTALL_SCRIPT = "https://raw.githubusercontent.com/nvm-sh/nvm/v{version}/install.sh"


class NvmTool(Tool):
    """Installs nvm with Homebrew on macOS or its install script on Linux."""

    @property
    def name(self) -> str:
        return "nvm"

    @property
    def display_name(self) -> str:
        return "NVM"

    @property
    def loader(self) -> Path:
        return self.context.recipe.nvm_loader

    @property
    def nvm_dir(self) -> Path:
        return self.context.paths.nvm_dir

    def _loader_present(self) -> bool:
        return self.loader.is_file() and self.loader.stat().st_size > 0

    def probe(self) -> bool:
        return self._loader_present()

    def install(self) -> None:
        self.env.set(NVM_DIR_ENV, str(self.nvm_dir))

        if self.context.profile.is_macos:
            self.install_packages("nvm")
            self.nvm_dir.mkdir(parents=True, exist_ok=True)
            self.env.persist_lines(self.profile_lines(), marker=NVM_DIR_ENV)
            return

        url = NVM_INSTALL_SCRIPT.format(version=self.context.config.versions.nvm)
        with tempfile.TemporaryDirectory() as tmp:
            script = download_file(url, Path(tmp) / "install.sh")
            self.runner.run(["bash", str(script)])

    def profile_lines(self) -> List[str]:
        """Shell profile lines that load a Homebrew-installed nvm."""
        completion = self.loader.parent / "etc" / "bash_completion.d" / "nvm"
        return [
            'export NVM_DIR="$HOME/.nvm"',
            f'[ -s "{self.loader}" ] && \\. "{self.loader}"',
            f'[ -s "{completion}" ] && \\. "{completion}"',
        ]

    def activate(self) -> None:
        self.env.set(NVM_DIR_ENV, str(self.nvm_dir))

    def verify(self) -> bool:
        if not self._loader_present():
            raise DependencyLoadError(
                "Failed to load NVM. Please restart your terminal and try again.",
                hint=f"Expected the nvm loader at {self.loader}",
            )
        if self.nvm_shell("command -v nvm", capture=True, check=False).returncode != 0:
            raise DependencyLoadError(
                "NVM still not detected after loading. "
                "Please restart your terminal and rerun the installer."
            )
        return True

    def version(self) -> Optional[str]:
        result = self.nvm_shell("nvm --version", capture=True, check=False)
        if result.returncode != 0:
            return None
        return result.stdout.strip() or None

    def nvm_shell(
        self, body: str, *, capture: bool = False, check: bool = True
    ) -> subprocess.CompletedProcess:
        """Run a bash snippet with nvm loaded."""
        script = f". {shlex.quote(str(self.loader))} >/dev/null 2>&1; {body}"
        return self.runner.shell(script, capture=capture, check=check)

    def run_nvm(self, *args: str) -> subprocess.CompletedProcess:
        """Run ``nvm <args>`` with output going to the terminal."""
        return self.nvm_shell("nvm " + shlex.join(args))
