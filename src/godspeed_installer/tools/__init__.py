"""Tools managed by the installer, in pipeline order."""

from godspeed_installer.tools.base import Tool, ToolContext
from godspeed_installer.tools.daemon import DaemonTool
from godspeed_installer.tools.git import GitTool
from godspeed_installer.tools.godspeed import GodspeedCliTool
from godspeed_installer.tools.homebrew import HomebrewTool
from godspeed_installer.tools.node import NodeTool
from godspeed_installer.tools.nvm import NvmTool
from godspeed_installer.tools.pnpm import PnpmTool
from godspeed_installer.tools.rag_node import RagNodeTool

__all__ = [
    "Tool",
    "ToolContext",
    "DaemonTool",
    "GitTool",
    "GodspeedCliTool",
    "HomebrewTool",
    "NodeTool",
    "NvmTool",
    "PnpmTool",
    "RagNodeTool",
]
