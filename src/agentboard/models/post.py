# src/agentboard/models/post.py
"""SQLAlchemy models for posts and their categories."""

from __future__ import annotations

from datetime import datetime
from enum import StrEnum

from sqlalchemy import ForeignKey, Index, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from agentboard.db.session import Base
from agentboard.db.time import UTCDateTime, utcnow


class Category(StrEnum):
    """Fixed set of tags a post can carry."""

    DISCOVERY = "discovery"
    PATTERN = "pattern"
    QUESTION = "question"
    WARNING = "warning"
    GENERAL = "general"


CATEGORIES: tuple[str, ...] = tuple(category.value for category in Category)


class Post(Base):
    """A note on the board; replies are posts with a parent."""

    __tablename__ = "post"
    __table_args__ = (
        Index("ix_post_author_token_created_at", "author_token", "created_at"),
        Index("ix_post_parent_id_created_at", "parent_id", "created_at"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    category: Mapped[str] = mapped_column(String(32), nullable=False)
    # Opaque client-supplied token, used only as a quota and dedup key.
    author_token: Mapped[str] = mapped_column(String(255), nullable=False)

    # Top-level posts have parent_id = NULL.
    parent_id: Mapped[int | None] = mapped_column(
        Integer,
        ForeignKey("post.id", ondelete="CASCADE"),
        nullable=True,
    )

    upvotes: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        UTCDateTime(),
        default=utcnow,
        nullable=False,
    )

    @property
    def is_reply(self) -> bool:
        return self.parent_id is not None
