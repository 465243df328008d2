"""godspeed-installer: bootstrap a Godspeed development toolchain.

Installs the package manager, Node version manager, Node.js runtime,
Godspeed CLI, Godspeed daemon and rag-node on the current machine.
"""

__version__ = "0.1.0"
