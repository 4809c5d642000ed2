"""Data access helpers for upvote records."""
from __future__ import annotations

from datetime import datetime

from sqlalchemy import select
from sqlalchemy.orm import Session

from agentboard.models.vote import UpvoteRecord

__all__ = ["UpvoteRepository"]


class UpvoteRepository:
    """Access to per-post, per-address upvote records."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def exists(self, post_id: int, ip_address: str) -> bool:
        """Return True if `ip_address` already upvoted `post_id`."""
        stmt = (
            select(UpvoteRecord.id)
            .where(
                UpvoteRecord.post_id == post_id,
                UpvoteRecord.ip_address == ip_address,
            )
            .limit(1)
        )
        return self.session.scalar(stmt) is not None

    def add(self, post_id: int, ip_address: str, created_at: datetime) -> UpvoteRecord:
        """Insert an upvote record; flushes so constraint violations surface here."""
        record = UpvoteRecord(post_id=post_id, ip_address=ip_address, created_at=created_at)
        self.session.add(record)
        self.session.flush()
        return record
