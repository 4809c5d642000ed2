# src/agentboard/schemas/__init__.py
"""Pydantic schemas for request and response bodies."""

from .common import ErrorResponse
from .post import (
    PostCreate,
    PostCreatedResponse,
    PostDetailResponse,
    PostListResponse,
    PostResponse,
)
from .vote import UpvoteResponse

__all__ = [
    "ErrorResponse",
    "PostCreate",
    "PostCreatedResponse",
    "PostDetailResponse",
    "PostListResponse",
    "PostResponse",
    "UpvoteResponse",
]
