"""Root pytest configuration and shared fixtures."""

from __future__ import annotations

import logging

import pytest

from killer.config import reset_default_values

_KILLER_ENV_VARS = ("KILLER_PLATFORM", "KILLER_EXCLUDE_SELF", "KILLER_QUIET", "KILLER_LOG_DIR")


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch, tmp_path):
    """Run every test without KILLER_* variables or a stray .env file."""
    for name in _KILLER_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    reset_default_values()
    yield
    reset_default_values()


@pytest.fixture(autouse=True)
def restore_root_logger():
    root_logger = logging.getLogger()
    handlers = list(root_logger.handlers)
    level = root_logger.level
    yield
    for handler in root_logger.handlers:
        if handler not in handlers:
            handler.close()
    root_logger.handlers = handlers
    root_logger.setLevel(level)
