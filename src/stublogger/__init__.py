"""In-memory logger test double.

This package provides a small, dependency-light foundation for:
- Capturing structured log calls (level, formatted message, exception) in memory.
- Asserting on the captured history with plain predicates.
- Answering "is this level enabled" the way a configured logger would.

Capture is never filtered: every call is recorded regardless of `min_level`.
"""

from .bridge import StubLogHandler, capture_stdlib
from .config import StubLoggerConfig, load_config
from .interfaces import Formatter, StructuredLogger
from .levels import LogLevel
from .models import EventId, TrackedLogEvent
from .stub import StubLogger

__all__ = [
    "EventId",
    "Formatter",
    "LogLevel",
    "StructuredLogger",
    "StubLogHandler",
    "StubLogger",
    "StubLoggerConfig",
    "TrackedLogEvent",
    "capture_stdlib",
    "load_config",
]
