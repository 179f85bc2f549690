"""In-memory stub logger that captures events for assertions in unit tests."""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable, Mapping, Sequence
from typing import Any

from .config import StubLoggerConfig
from .interfaces import Formatter
from .levels import LogLevel
from .models import EventId, TrackedLogEvent

logger = logging.getLogger(__name__)

EventPredicate = Callable[[TrackedLogEvent], bool]


def _percent_formatter(args: tuple[Any, ...]) -> Formatter:
    """Build a formatter applying stdlib `%`-style interpolation, like `logging` does.

    A single non-empty mapping argument is used for `%(name)s` lookups, as in
    `logging.LogRecord`.
    """
    params: tuple[Any, ...] | Mapping[str, Any] = args
    if len(args) == 1 and isinstance(args[0], Mapping) and args[0]:
        params = args[0]

    def _format(message: Any, exception: BaseException | None) -> str:
        text = str(message)
        if params:
            return text % params
        return text

    return _format


def _describe(events: Sequence[TrackedLogEvent]) -> str:
    """Render captured events one per line for failure messages."""
    if not events:
        return "  (no events captured)"
    lines = []
    for index, event in enumerate(events):
        line = f"  [{index}] {event.level.name}: {event.message}"
        if event.exception is not None:
            line += f" ({type(event.exception).__name__}: {event.exception})"
        lines.append(line)
    return "\n".join(lines)


class StubLogger:
    """Logger double that records every call instead of emitting it.

    Capture is unconditional: `min_level` only drives `is_enabled`, it never
    filters what gets recorded.
    """

    def __init__(self, *, min_level: LogLevel = LogLevel.TRACE, show_events: bool = True) -> None:
        """Create an empty stub.

        Args:
            min_level: Floor used by `is_enabled`; the default enables every level.
            show_events: Whether assertion failures list the captured events.
        """
        self._lock = threading.Lock()
        self._events: list[TrackedLogEvent] = []
        self._min_level = LogLevel(min_level)
        self._show_events = show_events

    @classmethod
    def from_config(cls, config: StubLoggerConfig) -> StubLogger:
        """Create a stub using configured defaults."""
        return cls(min_level=config.min_level, show_events=config.show_events)

    @property
    def min_level(self) -> LogLevel:
        return self._min_level

    @min_level.setter
    def min_level(self, value: LogLevel) -> None:
        self._min_level = LogLevel(value)

    @property
    def events(self) -> tuple[TrackedLogEvent, ...]:
        """Return a point-in-time copy of all captured events, in call order."""
        with self._lock:
            return tuple(self._events)

    def __len__(self) -> int:
        with self._lock:
            return len(self._events)

    def log(
        self,
        level: LogLevel,
        event_id: EventId | None,
        state: Any,
        exception: BaseException | None,
        formatter: Formatter,
    ) -> None:
        """Format and capture a single event (thread-safe append)."""
        if not callable(formatter):
            raise TypeError("formatter must be a callable taking (state, exception)")
        tracked = TrackedLogEvent(level=level, message=formatter(state, exception), exception=exception)
        with self._lock:
            self._events.append(tracked)

    def is_enabled(self, level: LogLevel) -> bool:
        """Return True when `level` is at least as severe as `min_level`.

        NONE compares equal to itself, so with `min_level=NONE` only
        `is_enabled(NONE)` is True.
        """
        return LogLevel(level) >= self._min_level

    def begin_scope(self, state: Any) -> Any:
        raise NotImplementedError("StubLogger does not support scopes")

    def _log_message(
        self,
        level: LogLevel,
        message: str,
        args: tuple[Any, ...],
        exception: BaseException | None,
        event_id: EventId | None,
    ) -> None:
        self.log(level, event_id, message, exception, _percent_formatter(args))

    def log_trace(
        self, message: str, *args: Any, exception: BaseException | None = None, event_id: EventId | None = None
    ) -> None:
        self._log_message(LogLevel.TRACE, message, args, exception, event_id)

    def log_debug(
        self, message: str, *args: Any, exception: BaseException | None = None, event_id: EventId | None = None
    ) -> None:
        self._log_message(LogLevel.DEBUG, message, args, exception, event_id)

    def log_information(
        self, message: str, *args: Any, exception: BaseException | None = None, event_id: EventId | None = None
    ) -> None:
        self._log_message(LogLevel.INFORMATION, message, args, exception, event_id)

    def log_warning(
        self, message: str, *args: Any, exception: BaseException | None = None, event_id: EventId | None = None
    ) -> None:
        self._log_message(LogLevel.WARNING, message, args, exception, event_id)

    def log_error(
        self, message: str, *args: Any, exception: BaseException | None = None, event_id: EventId | None = None
    ) -> None:
        self._log_message(LogLevel.ERROR, message, args, exception, event_id)

    def log_critical(
        self, message: str, *args: Any, exception: BaseException | None = None, event_id: EventId | None = None
    ) -> None:
        self._log_message(LogLevel.CRITICAL, message, args, exception, event_id)

    def assert_log_event(
        self,
        predicate: EventPredicate,
        assertion: Callable[[TrackedLogEvent], None] | None = None,
    ) -> TrackedLogEvent:
        """Assert that a captured event matches `predicate` and return the first match.

        If `assertion` is given it is called with the matched event; anything it
        raises propagates unchanged.
        """
        events = self.events
        tracked = next((event for event in events if predicate(event)), None)
        if tracked is None:
            logger.debug("No captured event matched among %d events", len(events))
            message = "Expected a log event matching the predicate, but none was found."
            if self._show_events:
                message += f"\nCaptured events:\n{_describe(events)}"
            raise AssertionError(message)

        if assertion is not None:
            assertion(tracked)
        return tracked

    def assert_log_count(self, predicate: EventPredicate, expected_count: int) -> None:
        """Assert that exactly `expected_count` captured events match `predicate`."""
        events = self.events
        count = sum(1 for event in events if predicate(event))
        if count != expected_count:
            logger.debug("Matched %d events, expected %d", count, expected_count)
            message = f"Expected {expected_count} matching log event(s), found {count}."
            if self._show_events:
                message += f"\nCaptured events:\n{_describe(events)}"
            raise AssertionError(message)
