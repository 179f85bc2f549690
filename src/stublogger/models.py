"""Captured log event models.

Events are designed to be:
- Immutable once captured (frozen models; the capture only ever grows).
- Cheap to match with plain predicates (`level`, `message`, `exception`).
- Faithful to what the caller passed: the exception is kept by identity.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from .levels import LogLevel


class EventId(BaseModel):
    """Identifier a structured logger accepts alongside each event."""

    model_config = ConfigDict(frozen=True)

    id: int = 0
    name: str | None = None


class TrackedLogEvent(BaseModel):
    """A single captured log call: severity, formatted message and optional exception."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    level: LogLevel
    message: str

    # Owned by whoever raised it; never copied or mutated here.
    exception: BaseException | None = None

    def has_exception(self, kind: type[BaseException]) -> bool:
        """Return True when the captured exception is an instance of `kind`."""
        return isinstance(self.exception, kind)
