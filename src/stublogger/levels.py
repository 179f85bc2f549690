"""Severity levels for structured log events."""

from __future__ import annotations

import enum
import logging
from collections.abc import Mapping

# Anything logged through the stdlib above CRITICAL lands on NONE.
_STDLIB_NONE = logging.CRITICAL + 10


class LogLevel(enum.IntEnum):
    """Ordered severity, from most verbose to the terminal NONE sentinel."""

    TRACE = 0
    DEBUG = 1
    INFORMATION = 2
    WARNING = 3
    ERROR = 4
    CRITICAL = 5
    NONE = 6

    @classmethod
    def from_name(cls, name: str) -> LogLevel:
        """Parse a level name (case-insensitive), accepting common aliases."""
        normalized = name.strip().lower()
        level = _NAME_ALIASES.get(normalized)
        if level is not None:
            return level
        try:
            return cls[normalized.upper()]
        except KeyError:
            accepted = ", ".join(member.name.lower() for member in cls)
            raise ValueError(f"Unknown log level {name!r}. Expected one of: {accepted}.") from None

    @classmethod
    def from_stdlib(cls, levelno: int) -> LogLevel:
        """Map a standard `logging` numeric level onto the nearest LogLevel at or below it."""
        if levelno >= _STDLIB_NONE:
            return cls.NONE
        for stdlib_level, level in _FROM_STDLIB:
            if levelno >= stdlib_level:
                return level
        return cls.TRACE

    def to_stdlib(self) -> int:
        """Return the standard `logging` numeric level for this severity."""
        return _TO_STDLIB[self]


_NAME_ALIASES: Mapping[str, LogLevel] = {
    "info": LogLevel.INFORMATION,
    "warn": LogLevel.WARNING,
    "fatal": LogLevel.CRITICAL,
}

_TO_STDLIB: Mapping[LogLevel, int] = {
    LogLevel.TRACE: 5,
    LogLevel.DEBUG: logging.DEBUG,
    LogLevel.INFORMATION: logging.INFO,
    LogLevel.WARNING: logging.WARNING,
    LogLevel.ERROR: logging.ERROR,
    LogLevel.CRITICAL: logging.CRITICAL,
    LogLevel.NONE: _STDLIB_NONE,
}

# Highest first, so the first threshold a levelno reaches wins.
_FROM_STDLIB: tuple[tuple[int, LogLevel], ...] = (
    (logging.CRITICAL, LogLevel.CRITICAL),
    (logging.ERROR, LogLevel.ERROR),
    (logging.WARNING, LogLevel.WARNING),
    (logging.INFO, LogLevel.INFORMATION),
    (logging.DEBUG, LogLevel.DEBUG),
)
