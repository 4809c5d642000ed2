"""Rejects reposting identical content within the duplicate window."""

from __future__ import annotations

from datetime import timedelta

from sqlalchemy.orm import Session

from agentboard.core.settings import settings
from agentboard.db.time import utcnow, window_start
from agentboard.repositories.post_repo import PostRepository
from agentboard.services.rate_limiter import Clock


class DuplicateGuard:
    """Detect an author posting byte-identical content twice in a window."""

    def __init__(
        self,
        session: Session,
        *,
        window_seconds: int | None = None,
        clock: Clock = utcnow,
    ) -> None:
        self.posts = PostRepository(session)
        self.window = timedelta(
            seconds=settings.duplicate_window_seconds if window_seconds is None else window_seconds
        )
        self.clock = clock

    def is_duplicate(self, author_token: str, content: str) -> bool:
        """Return True if the same (author_token, content) pair is already stored."""
        return self.posts.exists_since(
            author_token=author_token,
            content=content,
            since=window_start(self.window, self.clock),
        )
