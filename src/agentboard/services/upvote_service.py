"""Upvote handling: one upvote per post per requester address."""
from __future__ import annotations

import logging

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from agentboard.core.exceptions import AlreadyUpvoted, Internal, NotFound
from agentboard.db.time import utcnow
from agentboard.models.post import Post
from agentboard.repositories.post_repo import PostRepository
from agentboard.repositories.upvote_repo import UpvoteRepository
from agentboard.services.rate_limiter import Clock

logger = logging.getLogger(__name__)

__all__ = ["UpvoteService"]


class UpvoteService:
    """Record upvotes and keep each post's counter in step with them."""

    def __init__(self, session: Session, *, clock: Clock = utcnow) -> None:
        self.session = session
        self.posts = PostRepository(session)
        self.upvotes = UpvoteRepository(session)
        self.clock = clock

    def upvote(self, post_id: int, requester_id: str) -> Post:
        """Upvote `post_id` on behalf of `requester_id` and return the updated post.

        The record insert and the counter increment commit together. The
        increment is a single UPDATE evaluated by the store, so concurrent
        upvotes from different requesters never lose each other's count.

        Raises:
            NotFound: The post does not exist.
            AlreadyUpvoted: This requester already upvoted the post.
            Internal: The store rejected the write.
        """
        try:
            post = self.posts.get_by_id(post_id)
            if post is None:
                raise NotFound(post_id)

            if self.upvotes.exists(post_id, requester_id):
                raise AlreadyUpvoted(post_id, requester_id)

            try:
                self.upvotes.add(post_id, requester_id, self.clock())
            except IntegrityError as exc:
                # Lost the race against a concurrent upvote from the same address.
                self.session.rollback()
                raise AlreadyUpvoted(post_id, requester_id) from exc

            self.posts.increment_upvotes(post_id)
            self.session.commit()
            self.session.refresh(post)
        except SQLAlchemyError as exc:
            self.session.rollback()
            logger.error("Failed to upvote post %s", post_id, exc_info=True)
            raise Internal("Failed to upvote") from exc

        logger.debug("Post %s upvoted, now at %s", post_id, post.upvotes)
        return post
