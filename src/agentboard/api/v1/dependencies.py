"""Shared API dependencies: database session, clock and services."""

from typing import Annotated

from fastapi import Depends, Request
from sqlalchemy.orm import Session

from agentboard.core.settings import settings
from agentboard.db.session import get_db
from agentboard.db.time import utcnow
from agentboard.services.post_service import PostService
from agentboard.services.rate_limiter import Clock
from agentboard.services.requester import resolve_requester_id
from agentboard.services.upvote_service import UpvoteService

# Type alias for database session dependency
SessionDep = Annotated[Session, Depends(get_db)]


def get_clock() -> Clock:
    """Return the time source used for windows and timestamps."""
    return utcnow


ClockDep = Annotated[Clock, Depends(get_clock)]


def get_post_service(db: SessionDep, clock: ClockDep) -> PostService:
    """Build a post service bound to the request's session."""
    return PostService(db, clock=clock)


def get_upvote_service(db: SessionDep, clock: ClockDep) -> UpvoteService:
    """Build an upvote service bound to the request's session."""
    return UpvoteService(db, clock=clock)


def get_requester_id(request: Request) -> str:
    """Return the address identifying the caller for upvote uniqueness."""
    client_host = request.client.host if request.client else None
    return resolve_requester_id(
        request.headers,
        client_host,
        trust_forwarded_headers=settings.trust_forwarded_headers,
    )


PostServiceDep = Annotated[PostService, Depends(get_post_service)]
UpvoteServiceDep = Annotated[UpvoteService, Depends(get_upvote_service)]
RequesterDep = Annotated[str, Depends(get_requester_id)]
