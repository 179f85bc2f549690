"""Logger capability interface.

Code under test depends on this small interface so a production logger and
the in-memory stub can be swapped without changing the caller.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Protocol, TypeAlias

from .levels import LogLevel
from .models import EventId

Formatter: TypeAlias = Callable[[Any, BaseException | None], str]


class StructuredLogger(Protocol):
    def log(
        self,
        level: LogLevel,
        event_id: EventId | None,
        state: Any,
        exception: BaseException | None,
        formatter: Formatter,
    ) -> None:
        """Write an event, rendering its message with `formatter(state, exception)`."""

    def is_enabled(self, level: LogLevel) -> bool:
        """Return whether events at `level` would be written."""

    def begin_scope(self, state: Any) -> Any:
        """Open a logical scope carrying `state`."""
