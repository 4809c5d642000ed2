# src/agentboard/db/time.py
"""Time utilities for database models and trailing windows."""

from collections.abc import Callable
from datetime import UTC, datetime, timedelta

from sqlalchemy import DateTime
from sqlalchemy.types import TypeDecorator


def utcnow() -> datetime:
    """Return the current UTC time as a timezone-aware datetime."""
    return datetime.now(UTC)


def window_start(window: timedelta, clock: Callable[[], datetime] = utcnow) -> datetime:
    """Return the inclusive lower bound of the window ending now."""
    return clock() - window


class UTCDateTime(TypeDecorator):
    """Timezone-aware UTC timestamp column.

    Values are normalised to UTC on the way in. Backends without a zone
    type (SQLite) hand back naive values, which are re-tagged as UTC.
    """

    impl = DateTime(timezone=True)
    cache_ok = True

    def process_bind_param(self, value, dialect):
        if value is None:
            return None
        if value.tzinfo is None:
            return value.replace(tzinfo=UTC)
        return value.astimezone(UTC)

    def process_result_value(self, value, dialect):
        if value is None:
            return None
        if value.tzinfo is None:
            return value.replace(tzinfo=UTC)
        return value.astimezone(UTC)
