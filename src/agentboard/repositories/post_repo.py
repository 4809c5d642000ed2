"""Data access helpers for working with posts."""
from __future__ import annotations

from datetime import datetime

from sqlalchemy import select, update
from sqlalchemy.orm import Session

from agentboard.models.post import Post

__all__ = ["PostRepository"]


class PostRepository:
    """Thin wrapper around database access for post entities."""

    def __init__(self, session: Session) -> None:
        """Initialize the repository with a SQLAlchemy session."""
        self.session = session

    def get_by_id(self, post_id: int) -> Post | None:
        """Return a post by identifier."""
        return self.session.get(Post, post_id)

    def list_posts(
        self,
        *,
        limit: int,
        category: str | None = None,
        parent_id: int | None = None,
    ) -> list[Post]:
        """Return posts newest first.

        Without `parent_id` only top-level posts are returned; with it, only
        the direct replies to that post.
        """
        stmt = select(Post)
        if parent_id is None:
            stmt = stmt.where(Post.parent_id.is_(None))
        else:
            stmt = stmt.where(Post.parent_id == parent_id)
        if category:
            stmt = stmt.where(Post.category == category)
        stmt = stmt.order_by(Post.created_at.desc(), Post.id.desc()).limit(limit)
        return list(self.session.scalars(stmt))

    def exists_since(self, *, author_token: str, content: str, since: datetime) -> bool:
        """Return True if the author stored identical content at or after `since`."""
        stmt = (
            select(Post.id)
            .where(
                Post.author_token == author_token,
                Post.content == content,
                Post.created_at >= since,
            )
            .limit(1)
        )
        return self.session.scalar(stmt) is not None

    def create(
        self,
        *,
        content: str,
        category: str,
        author_token: str,
        created_at: datetime,
        parent_id: int | None = None,
    ) -> Post:
        """Insert a new post and return the persisted ORM instance."""
        post = Post(
            content=content,
            category=category,
            author_token=author_token,
            parent_id=parent_id,
            upvotes=0,
            created_at=created_at,
        )
        self.session.add(post)
        self.session.flush()
        return post

    def increment_upvotes(self, post_id: int, delta: int = 1) -> int:
        """Atomically add `delta` to a post's upvote counter.

        Returns the number of rows touched (0 when the post is gone).
        """
        result = self.session.execute(
            update(Post)
            .where(Post.id == post_id)
            .values(upvotes=Post.upvotes + delta)
            .execution_options(synchronize_session=False)
        )
        return result.rowcount
