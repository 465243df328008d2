"""Logging setup for the installer.

Operator-facing progress goes through ``core.console``; log records are
diagnostics for ``--verbose`` and ``--debug`` runs and go to stderr so they
never interleave with prompts on stdout.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

PACKAGE_LOGGER = "godspeed_installer"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def resolve_level(*, debug: bool = False, verbose: bool = False, quiet: bool = False) -> int:
    """Map CLI flags to a logging level.

    Precedence:
    - quiet → ERROR
    - debug → DEBUG
    - verbose → INFO
    - default → WARNING
    """
    if quiet:
        return logging.ERROR
    if debug:
        return logging.DEBUG
    if verbose:
        return logging.INFO
    return logging.WARNING


def configure_logging(*, debug: bool = False, verbose: bool = False, quiet: bool = False) -> None:
    """Configure the installer's loggers based on CLI flags.

    Safe to call more than once; the stderr handler is installed once and
    only its level changes.
    """
    level = resolve_level(debug=debug, verbose=verbose, quiet=quiet)
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)
    logger.propagate = False

    if not any(getattr(h, "_godspeed", False) for h in logger.handlers):
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._godspeed = True  # type: ignore[attr-defined]
        logger.addHandler(handler)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a module-level logger."""
    return logging.getLogger(name if name is not None else PACKAGE_LOGGER)
