# src/agentboard/models/__init__.py
"""SQLAlchemy models for the Agent Board application."""

from .post import CATEGORIES, Category, Post
from .rate import RateLimitEvent
from .vote import UpvoteRecord

__all__ = [
    "CATEGORIES", "Category",
    "Post",
    "RateLimitEvent",
    "UpvoteRecord",
]
