from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from .levels import LogLevel
from .models import EventId
from .stub import StubLogger

_OWN_LOGGER_PREFIX = "stublogger"


def _render(record: logging.LogRecord, exception: BaseException | None) -> str:
    return record.getMessage()


class StubLogHandler(logging.Handler):
    """Forward standard-library log records into a StubLogger."""

    def __init__(self, stub: StubLogger) -> None:
        super().__init__(level=logging.NOTSET)
        self._stub = stub

    def emit(self, record: logging.LogRecord) -> None:  # type: ignore[override]
        if record.name == _OWN_LOGGER_PREFIX or record.name.startswith(_OWN_LOGGER_PREFIX + "."):
            return
        try:
            exception = record.exc_info[1] if record.exc_info else None
            self._stub.log(
                LogLevel.from_stdlib(record.levelno),
                EventId(name=record.name),
                record,
                exception,
                _render,
            )
        except Exception:  # pragma: no cover - logging handlers must not raise
            self.handleError(record)


class _LevelFloor(logging.Filter):
    """Drop records below `levelno`; keeps existing handlers at their old verbosity."""

    def __init__(self, levelno: int) -> None:
        super().__init__()
        self._levelno = levelno

    def filter(self, record: logging.LogRecord) -> bool:  # type: ignore[override]
        return record.levelno >= self._levelno


@contextmanager
def capture_stdlib(stub: StubLogger, logger_name: str | None = None) -> Iterator[StubLogHandler]:
    """Route records from a stdlib logger (root by default) into `stub` for the block.

    The logger's level is lowered for the duration so every record reaches the
    handler; capture stays unconditional, as with direct `StubLogger.log` calls.
    Handlers already attached to that logger keep their previous effective
    level. Records from a named logger still propagate to its ancestors'
    handlers as usual.
    """
    target = logging.getLogger(logger_name)
    handler = StubLogHandler(stub)
    previous_level = target.level
    floor = _LevelFloor(target.getEffectiveLevel())
    existing = list(target.handlers)
    for other in existing:
        other.addFilter(floor)
    target.addHandler(handler)
    target.setLevel(1)
    try:
        yield handler
    finally:
        target.removeHandler(handler)
        target.setLevel(previous_level)
        for other in existing:
            other.removeFilter(floor)


__all__ = ["StubLogHandler", "capture_stdlib"]
