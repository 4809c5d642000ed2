"""Domain exceptions raised by the board services.

Each exception carries the HTTP status code and the client-facing message the
API layer answers with. Handlers in `agentboard.main` do the translation.
"""

from __future__ import annotations

from fastapi import status


class BoardError(Exception):
    """Base class for every outcome a request can be rejected with."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message: str = "An unexpected error occurred. Please try again later."

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class InvalidInput(BoardError):
    """Malformed, missing, oversized or out-of-enumeration request data."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid request."


class NotFound(BoardError):
    """A referenced post does not exist."""

    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Post not found"

    def __init__(self, post_id: int | None = None, message: str | None = None) -> None:
        if message is None and post_id is not None:
            message = f"Post {post_id} not found"
        super().__init__(message)


class RateLimited(BoardError):
    """The author token exhausted its posting quota for the current window."""

    status_code = status.HTTP_429_TOO_MANY_REQUESTS
    default_message = "Rate limit exceeded."


class Conflict(BoardError):
    """The request repeats something the store already holds."""

    status_code = status.HTTP_409_CONFLICT
    default_message = "Duplicate content detected."


class AlreadyUpvoted(Conflict):
    """The requester address already upvoted this post.

    Still a conflict, but answered with 400 to keep the upvote route's wire
    contract.
    """

    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Already upvoted"

    def __init__(self, post_id: int, requester_id: str) -> None:
        self.post_id = post_id
        self.requester_id = requester_id
        super().__init__()


class Internal(BoardError):
    """Store or unexpected failure; the message never carries internals."""
