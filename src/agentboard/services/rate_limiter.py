"""Per-author posting quota backed by the rate-limit event log."""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime, timedelta

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from agentboard.core.settings import settings
from agentboard.db.time import utcnow, window_start
from agentboard.repositories.rate_limit_repo import RateLimitRepository

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


class RateLimiter:
    """Sliding-window quota on post creation, keyed by author token.

    The check and the record are separate store round trips, so concurrent
    requests from one token can briefly overshoot the quota. That tolerance is
    accepted: the limiter throttles, it does not guarantee an exact count.
    """

    def __init__(
        self,
        session: Session,
        *,
        window_seconds: int | None = None,
        max_posts: int | None = None,
        clock: Clock = utcnow,
    ) -> None:
        self.session = session
        self.events = RateLimitRepository(session)
        self.window = timedelta(
            seconds=settings.rate_limit_window_seconds if window_seconds is None else window_seconds
        )
        self.max_posts = settings.rate_limit_max_posts if max_posts is None else max_posts
        self.clock = clock

    def allow(self, author_token: str) -> bool:
        """Return True if `author_token` may create another post now.

        Fails closed: any store error denies the request.
        """
        since = window_start(self.window, self.clock)
        try:
            count = self.events.count_since(author_token, since)
        except SQLAlchemyError:
            logger.error("Rate limit check failed for author token", exc_info=True)
            self.session.rollback()
            return False
        return count < self.max_posts

    def record(self, author_token: str) -> None:
        """Log one post creation for `author_token`.

        Best effort: a failure is logged and the already-created post stands.
        """
        try:
            self.events.add(author_token, self.clock())
            self.session.commit()
        except SQLAlchemyError:
            self.session.rollback()
            logger.error("Failed to record rate limit event", exc_info=True)
