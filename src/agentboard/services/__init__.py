# src/agentboard/services/__init__.py
"""Business logic services for the Agent Board application."""

from .duplicate_guard import DuplicateGuard
from .post_service import PostService
from .rate_limiter import RateLimiter
from .requester import resolve_requester_id
from .upvote_service import UpvoteService

__all__ = [
    "DuplicateGuard",
    "PostService",
    "RateLimiter",
    "UpvoteService",
    "resolve_requester_id",
]
