"""Shared fixtures isolating tests from host environment and logging state."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

import pytest

_SETTINGS_ENVIRONMENT_NAMES = (
    "APP_HOST",
    "PORT",
    "APP_ENV",
    "NODE_ENV",
    "APP_VERSION",
    "HOSTNAME",
    "LOG_LEVEL",
    "SHUTDOWN_TIMEOUT_SECONDS",
)


@pytest.fixture(autouse=True)
def clean_settings_environment(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Remove settings overrides and any working-directory `.env` from each test.

    Args:
        monkeypatch: Pytest monkeypatch fixture.
        tmp_path: Empty per-test directory used as working directory.
    """

    for environment_name in _SETTINGS_ENVIRONMENT_NAMES:
        monkeypatch.delenv(environment_name, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture(autouse=True)
def restore_root_logging() -> Iterator[None]:
    """Restore root logger handlers and level after each test."""

    root_logger = logging.getLogger()
    original_handlers = list(root_logger.handlers)
    original_level = root_logger.level
    yield
    for handler in list(root_logger.handlers):
        if handler not in original_handlers:
            root_logger.removeHandler(handler)
    root_logger.setLevel(original_level)
