# src/agentboard/schemas/vote.py
"""Upvote-related Pydantic schemas."""

from pydantic import BaseModel

from .post import PostResponse


class UpvoteResponse(BaseModel):
    """Result of a successful upvote, carrying the updated post."""

    success: bool = True
    post: PostResponse
