"""Pytest plugin exposing a fresh `stub_logger` per test."""

from __future__ import annotations

import pytest

from .config import StubLoggerConfig, load_config
from .stub import StubLogger


@pytest.fixture(scope="session")
def stub_logger_config() -> StubLoggerConfig:
    """Environment-driven defaults, loaded once per session."""
    return load_config()


@pytest.fixture
def stub_logger(stub_logger_config: StubLoggerConfig) -> StubLogger:
    """A fresh stub per test, built from the session config."""
    return StubLogger.from_config(stub_logger_config)
