"""Tests for logging configuration."""

from __future__ import annotations

import logging

from godspeed_installer.core.logging import (
    PACKAGE_LOGGER,
    configure_logging,
    get_logger,
    resolve_level,
)


class TestResolveLevel:
    def test_default_is_warning(self) -> None:
        assert resolve_level() == logging.WARNING

    def test_flags(self) -> None:
        assert resolve_level(verbose=True) == logging.INFO
        assert resolve_level(debug=True) == logging.DEBUG
        assert resolve_level(quiet=True) == logging.ERROR

    def test_quiet_wins(self) -> None:
        assert resolve_level(quiet=True, debug=True, verbose=True) == logging.ERROR


class TestConfigureLogging:
    def test_single_handler_across_calls(self) -> None:
        configure_logging(verbose=True)
        configure_logging(debug=True)

        logger = logging.getLogger(PACKAGE_LOGGER)
        ours = [h for h in logger.handlers if getattr(h, "_godspeed", False)]
        assert len(ours) == 1
        assert logger.level == logging.DEBUG

    def test_default_name_is_package(self) -> None:
        assert get_logger().name == PACKAGE_LOGGER
