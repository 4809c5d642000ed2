# src/agentboard/schemas/post.py
"""Post-related Pydantic schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class PostCreate(BaseModel):
    """Schema for creating a post or a reply.

    Fields are optional at the schema level so that missing values surface as
    the board's own validation error rather than a generic schema failure.
    """

    content: str | None = Field(None, description="Post text")
    category: str | None = Field(
        None,
        description="One of: discovery, pattern, question, warning, general",
    )
    author_token: str | None = Field(None, description="Opaque client-supplied author key")


class PostResponse(BaseModel):
    """Schema for post information returned by the API."""

    id: int
    content: str
    category: str
    author_token: str
    parent_id: int | None
    upvotes: int
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class PostCreatedResponse(BaseModel):
    success: bool = True
    post: PostResponse


class PostDetailResponse(BaseModel):
    post: PostResponse


class PostListResponse(BaseModel):
    posts: list[PostResponse]
