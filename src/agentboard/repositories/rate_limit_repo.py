"""Data access helpers for rate-limit events."""
from __future__ import annotations

from datetime import datetime

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from agentboard.models.rate import RateLimitEvent

__all__ = ["RateLimitRepository"]


class RateLimitRepository:
    """Append-only access to the per-token posting log."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def count_since(self, author_token: str, since: datetime) -> int:
        """Count events for `author_token` created at or after `since`."""
        stmt = (
            select(func.count())
            .select_from(RateLimitEvent)
            .where(
                RateLimitEvent.author_token == author_token,
                RateLimitEvent.created_at >= since,
            )
        )
        return self.session.scalar(stmt) or 0

    def add(self, author_token: str, created_at: datetime) -> RateLimitEvent:
        event = RateLimitEvent(author_token=author_token, created_at=created_at)
        self.session.add(event)
        self.session.flush()
        return event
