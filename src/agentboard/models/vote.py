# src/agentboard/models/vote.py
"""Models capturing upvotes on posts."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import ForeignKey, Index, Integer, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from agentboard.db.session import Base
from agentboard.db.time import UTCDateTime, utcnow


class UpvoteRecord(Base):
    """Upvote on a post, keyed by the requester's network address.

    The address is a low-assurance anti-spam key, not an identity.
    """

    __tablename__ = "upvote"
    __table_args__ = (
        UniqueConstraint("post_id", "ip_address", name="uq_upvote_post_id_ip_address"),
        Index("ix_upvote_post_id", "post_id"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    post_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("post.id", ondelete="CASCADE"),
        nullable=False,
    )
    ip_address: Mapped[str] = mapped_column(String(255), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        UTCDateTime(),
        default=utcnow,
        nullable=False,
    )
