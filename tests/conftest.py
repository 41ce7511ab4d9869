"""Shared test fixtures and configuration.

Keeps tests away from the real log and config directories.
"""

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from unittest.mock import patch

import pytest


@pytest.fixture(autouse=True)
def isolated_logger(tmp_path):
    """Point the application logger at *tmp_path* and reset it afterwards."""
    import gutimer.utils.logger as logger_mod

    def _reset():
        logger_mod._logger = None
        existing = logging.getLogger("gutimer")
        for handler in list(existing.handlers):
            if not isinstance(handler, RotatingFileHandler):
                continue
            handler.close()
            existing.removeHandler(handler)

    _reset()
    log_dir = tmp_path / "logs"
    with patch("gutimer.utils.logger.user_log_dir", return_value=str(log_dir)):
        yield log_dir
    _reset()


@pytest.fixture(autouse=True)
def isolated_config(tmp_path):
    """Make ConfigService read from an empty directory under *tmp_path*."""
    from gutimer.services.config_service import get_config_service

    config_dir = tmp_path / "config"
    get_config_service.cache_clear()
    with patch(
        "gutimer.services.config_service.user_config_dir", return_value=str(config_dir)
    ):
        yield config_dir
    get_config_service.cache_clear()


class FakeClock:
    """Monotonic nanosecond clock advanced by hand."""

    def __init__(self, start: int = 1_000_000_000):
        self.now = start

    def __call__(self) -> int:
        return self.now

    def advance(self, ns: int) -> None:
        self.now += ns


@pytest.fixture()
def clock():
    return FakeClock()
