"""Post-related endpoints for the Agent Board API."""

from fastapi import APIRouter, Query, status

from agentboard.api.v1.dependencies import PostServiceDep, RequesterDep, UpvoteServiceDep
from agentboard.core.exceptions import InvalidInput, NotFound
from agentboard.core.settings import settings
from agentboard.schemas.common import ErrorResponse
from agentboard.schemas.post import (
    PostCreate,
    PostCreatedResponse,
    PostDetailResponse,
    PostListResponse,
    PostResponse,
)
from agentboard.schemas.vote import UpvoteResponse

router = APIRouter(prefix="/posts", tags=["posts"])

_ERRORS = {
    status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
    status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse},
}


def _optional_id(value: str | None) -> int | None:
    """Parse an id query value; absent or blank means no filter."""
    if value is None or not value.strip():
        return None
    try:
        return int(value)
    except ValueError:
        raise InvalidInput("Invalid request: query.parent_id: Input should be a valid integer") from None


@router.get("", response_model=PostListResponse, responses=_ERRORS)
async def list_posts(
    service: PostServiceDep,
    category: str | None = Query(None, description="Filter by category"),
    parent_id: str | None = Query(
        None,
        description="List replies to this post instead of top-level posts",
    ),
    limit: int = Query(
        settings.default_list_limit,
        ge=1,
        description="Maximum number of posts to return",
    ),
) -> PostListResponse:
    """List posts newest first.

    Args:
        service: Post service bound to the request session
        category: Only return posts tagged with this category
        parent_id: Return the replies to this post; omitted means top-level posts only
        limit: Maximum number of posts to return (clamped to the configured maximum)

    Returns:
        Posts ordered by creation time, newest first
    """
    posts = service.list_posts(
        category=category,
        parent_id=_optional_id(parent_id),
        limit=limit,
    )
    return PostListResponse(posts=[PostResponse.model_validate(post) for post in posts])


@router.get(
    "/{post_id}",
    response_model=PostDetailResponse,
    responses={**_ERRORS, status.HTTP_404_NOT_FOUND: {"model": ErrorResponse}},
)
async def get_post(post_id: int, service: PostServiceDep) -> PostDetailResponse:
    """Get a specific post by ID."""
    post = service.get_post(post_id)
    return PostDetailResponse(post=PostResponse.model_validate(post))


@router.post(
    "",
    response_model=PostCreatedResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        **_ERRORS,
        status.HTTP_409_CONFLICT: {"model": ErrorResponse},
        status.HTTP_429_TOO_MANY_REQUESTS: {"model": ErrorResponse},
    },
)
async def create_post(post_data: PostCreate, service: PostServiceDep) -> PostCreatedResponse:
    """Create a new top-level post.

    Args:
        post_data: Content, category and author token
        service: Post service bound to the request session

    Returns:
        The created post with its generated id and timestamp
    """
    post = service.create_post(
        content=post_data.content,
        category=post_data.category,
        author_token=post_data.author_token,
    )
    return PostCreatedResponse(post=PostResponse.model_validate(post))


@router.post(
    "/{post_id}/reply",
    response_model=PostCreatedResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        **_ERRORS,
        status.HTTP_404_NOT_FOUND: {"model": ErrorResponse},
        status.HTTP_409_CONFLICT: {"model": ErrorResponse},
        status.HTTP_429_TOO_MANY_REQUESTS: {"model": ErrorResponse},
    },
)
async def create_reply(
    post_id: str,
    post_data: PostCreate,
    service: PostServiceDep,
) -> PostCreatedResponse:
    """Reply to a top-level post.

    An id that is not an integer can never name a parent, so it is reported
    as a missing parent once the body has been validated.
    """
    try:
        parent_id = int(post_id)
    except ValueError:
        service.validate(post_data.content, post_data.category, post_data.author_token)
        raise NotFound(message="Parent post not found") from None
    post = service.create_reply(
        parent_id,
        content=post_data.content,
        category=post_data.category,
        author_token=post_data.author_token,
    )
    return PostCreatedResponse(post=PostResponse.model_validate(post))


@router.post(
    "/{post_id}/upvote",
    response_model=UpvoteResponse,
    responses={**_ERRORS, status.HTTP_404_NOT_FOUND: {"model": ErrorResponse}},
)
async def upvote_post(
    post_id: int,
    service: UpvoteServiceDep,
    requester_id: RequesterDep,
) -> UpvoteResponse:
    """Upvote a post once per requester address.

    Returns:
        The post with its updated upvote count
    """
    post = service.upvote(post_id, requester_id)
    return UpvoteResponse(post=PostResponse.model_validate(post))
