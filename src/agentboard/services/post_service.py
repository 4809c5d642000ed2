"""Service-level helpers for creating and reading posts."""
from __future__ import annotations

import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from agentboard.core.exceptions import Conflict, Internal, InvalidInput, NotFound, RateLimited
from agentboard.core.settings import settings
from agentboard.db.time import utcnow
from agentboard.models.post import CATEGORIES, Post
from agentboard.repositories.post_repo import PostRepository
from agentboard.services.duplicate_guard import DuplicateGuard
from agentboard.services.rate_limiter import Clock, RateLimiter

logger = logging.getLogger(__name__)

__all__ = ["PostService"]


class PostService:
    """Create top-level posts and replies, and read them back.

    Every create runs the same pipeline: field validation, parent lookup
    (replies only), quota check, duplicate check, insert, quota record.
    Rejections happen before anything is written.
    """

    def __init__(
        self,
        session: Session,
        *,
        rate_limiter: RateLimiter | None = None,
        duplicate_guard: DuplicateGuard | None = None,
        clock: Clock = utcnow,
    ) -> None:
        self.session = session
        self.posts = PostRepository(session)
        self.rate_limiter = rate_limiter or RateLimiter(session, clock=clock)
        self.duplicate_guard = duplicate_guard or DuplicateGuard(session, clock=clock)
        self.clock = clock

    def create_post(
        self,
        *,
        content: str | None,
        category: str | None,
        author_token: str | None,
    ) -> Post:
        """Create a top-level post.

        Raises:
            InvalidInput: Missing field, content too long, or unknown category.
            RateLimited: The author token is over its hourly quota.
            Conflict: The author posted the same content within the window.
            Internal: The store rejected the insert.
        """
        content, category, author_token = self.validate(content, category, author_token)
        return self._create(content, category, author_token, parent_id=None)

    def create_reply(
        self,
        parent_id: int,
        *,
        content: str | None,
        category: str | None,
        author_token: str | None,
    ) -> Post:
        """Create a reply to an existing top-level post.

        Raises:
            InvalidInput: As for `create_post`, or the parent is itself a reply.
            NotFound: The parent post does not exist.
            RateLimited: The author token is over its hourly quota.
            Conflict: The author posted the same content within the window.
            Internal: The store rejected a query or the insert.
        """
        content, category, author_token = self.validate(content, category, author_token)
        return self._create(content, category, author_token, parent_id=parent_id)

    def get_post(self, post_id: int) -> Post:
        try:
            post = self.posts.get_by_id(post_id)
        except SQLAlchemyError as exc:
            logger.error("Failed to load post %s", post_id, exc_info=True)
            raise Internal("Failed to fetch post. Please try again.") from exc
        if post is None:
            raise NotFound(post_id)
        return post

    def list_posts(
        self,
        *,
        category: str | None = None,
        parent_id: int | None = None,
        limit: int | None = None,
    ) -> list[Post]:
        """Return posts newest first.

        Without `parent_id` only top-level posts are listed; with it, only
        that post's replies. `limit` is clamped to the configured maximum.
        """
        if limit is None:
            limit = settings.default_list_limit
        limit = max(1, min(limit, settings.max_list_limit))
        try:
            return self.posts.list_posts(limit=limit, category=category, parent_id=parent_id)
        except SQLAlchemyError as exc:
            logger.error("Failed to list posts", exc_info=True)
            raise Internal("Failed to fetch posts. Please try again.") from exc

    def validate(
        self,
        content: str | None,
        category: str | None,
        author_token: str | None,
    ) -> tuple[str, str, str]:
        """Check the submitted fields, raising InvalidInput on the first problem."""
        if not content or not category or not author_token:
            raise InvalidInput("Missing required fields: content, category, author_token")

        if len(content) > settings.max_content_length:
            raise InvalidInput(
                f"Content too long. Maximum {settings.max_content_length} characters."
            )

        if category not in CATEGORIES:
            raise InvalidInput(f"Invalid category. Must be one of: {', '.join(CATEGORIES)}")

        if len(author_token) > settings.max_author_token_length:
            raise InvalidInput(
                f"author_token too long. Maximum {settings.max_author_token_length} characters."
            )

        return content, category, author_token

    def _require_parent(self, parent_id: int) -> Post:
        parent = self.posts.get_by_id(parent_id)
        if parent is None:
            raise NotFound(message="Parent post not found")
        # Threads are one level deep.
        if parent.is_reply:
            raise InvalidInput("Cannot reply to a reply. Reply to the top-level post instead.")
        return parent

    def _create(
        self,
        content: str,
        category: str,
        author_token: str,
        *,
        parent_id: int | None,
    ) -> Post:
        try:
            if parent_id is not None:
                self._require_parent(parent_id)

            if not self.rate_limiter.allow(author_token):
                logger.info("Rate limit exceeded for author token")
                raise RateLimited(
                    f"Rate limit exceeded. Maximum {self.rate_limiter.max_posts} posts per hour."
                )

            if self.duplicate_guard.is_duplicate(author_token, content):
                logger.info("Duplicate content rejected for author token")
                raise Conflict(
                    "Duplicate content detected. Same post already exists within the last hour."
                )

            post = self.posts.create(
                content=content,
                category=category,
                author_token=author_token,
                parent_id=parent_id,
                created_at=self.clock(),
            )
            self.session.commit()
            self.session.refresh(post)
        except SQLAlchemyError as exc:
            self.session.rollback()
            logger.error("Failed to create post (parent_id=%s)", parent_id, exc_info=True)
            if parent_id is None:
                raise Internal("Failed to create post. Please try again.") from exc
            raise Internal("Failed to create reply. Please try again.") from exc

        self.rate_limiter.record(author_token)
        return post
