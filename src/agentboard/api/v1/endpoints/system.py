"""System and transparency endpoints for the Agent Board API."""

from __future__ import annotations

import logging
import time

from fastapi import APIRouter
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from agentboard.api.v1.dependencies import SessionDep
from agentboard.core.settings import settings
from agentboard.models import CATEGORIES, Post, RateLimitEvent, UpvoteRecord

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/system", tags=["system"])


@router.get("/config")
async def get_public_config() -> dict[str, object]:
    """Return the public posting rules so clients can explain rejections.

    Excludes connection strings and anything not needed by a client.
    """
    return {
        "app": {
            "name": settings.app_name,
            "version": settings.app_version,
        },
        "categories": list(CATEGORIES),
        "limits": {
            "max_content_length": settings.max_content_length,
            "max_author_token_length": settings.max_author_token_length,
            "default_list_limit": settings.default_list_limit,
            "max_list_limit": settings.max_list_limit,
        },
        "rate_limit": {
            "window_seconds": settings.rate_limit_window_seconds,
            "max_posts": settings.rate_limit_max_posts,
        },
        "duplicate_window_seconds": settings.duplicate_window_seconds,
    }


@router.get("/activity-stats")
async def get_activity_stats(db: SessionDep) -> dict[str, int]:
    """Board-wide activity counters."""
    posts = db.query(Post).filter(Post.parent_id.is_(None)).count() or 0
    replies = db.query(Post).filter(Post.parent_id.is_not(None)).count() or 0
    upvotes = db.query(UpvoteRecord).count() or 0
    events = db.query(RateLimitEvent).count() or 0
    return {
        "posts": int(posts),
        "replies": int(replies),
        "upvotes": int(upvotes),
        "rate_limit_events": int(events),
    }


@router.get("/health")
async def get_system_health(db: SessionDep) -> dict[str, object]:
    """Health check including database connectivity."""
    try:
        db.execute(text("SELECT 1"))
        db_status = "healthy"
    except SQLAlchemyError:
        logger.error("Database health check failed", exc_info=True)
        db_status = "unhealthy"

    return {
        "status": "healthy" if db_status == "healthy" else "unhealthy",
        "timestamp": int(time.time()),
        "components": {
            "database": db_status,
        },
        "version": settings.app_version,
    }
