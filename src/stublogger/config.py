"""Configuration loading and validation.

This module is responsible for:

- Loading `.env` into the process environment (without overriding existing vars).
- Converting environment variables into a strongly-typed Pydantic model.
- Validating values and providing actionable error messages.
"""

import logging
import os

import dotenv
from pydantic import BaseModel, Field, field_validator

from .levels import LogLevel

logger = logging.getLogger(__name__)


def _get_env_bool(name: str, default: bool) -> bool:
    """Read a boolean env var with a default."""
    raw = os.getenv(name)
    if raw is None or raw == "":
        return default
    normalized = raw.strip().lower()
    if normalized in {"true", "1", "yes", "y", "on"}:
        return True
    if normalized in {"false", "0", "no", "n", "off"}:
        return False
    raise ValueError(f"{name} must be a boolean (true/false). Got: {raw!r}")


def _get_env_level(name: str, default: LogLevel) -> LogLevel:
    """Read a log level name from an env var with a default."""
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return LogLevel.from_name(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be a log level name. {exc}") from exc


class StubLoggerConfig(BaseModel):
    """Defaults applied to stub loggers created by fixtures and `StubLogger.from_config`."""

    min_level: LogLevel = Field(default=LogLevel.TRACE, description="Floor used by is_enabled")
    show_events: bool = Field(default=True, description="List captured events in assertion failures")

    @field_validator("min_level", mode="before")
    def parse_min_level(cls, v: object) -> object:
        """Accept level names as well as LogLevel members / ranks."""
        if isinstance(v, str):
            return LogLevel.from_name(v)
        return v


def load_config() -> StubLoggerConfig:
    """Load stub logger configuration from environment variables.

    Notes:
    - Calls `dotenv.load_dotenv()` so local `.env` values are visible to the process.
    - Raises `ValueError` naming the offending variable when a value can't be parsed.
    """
    dotenv.load_dotenv()

    config = StubLoggerConfig(
        min_level=_get_env_level("STUB_LOGGER_MIN_LEVEL", LogLevel.TRACE),
        show_events=_get_env_bool("STUB_LOGGER_SHOW_EVENTS", True),
    )
    logger.debug("Loaded stub logger config: %s", config)
    return config
