# src/agentboard/models/rate.py
"""Append-only log of post creations used by the rate limiter."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import Index, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from agentboard.db.session import Base
from agentboard.db.time import UTCDateTime, utcnow


class RateLimitEvent(Base):
    """One row per successful post creation by an author token."""

    __tablename__ = "rate_limit_event"
    __table_args__ = (
        Index("ix_rate_limit_event_author_token_created_at", "author_token", "created_at"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    author_token: Mapped[str] = mapped_column(String(255), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        UTCDateTime(),
        default=utcnow,
        nullable=False,
    )
