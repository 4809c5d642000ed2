"""Tests for the upvote service."""

from unittest.mock import patch

import pytest

from agentboard.core.exceptions import AlreadyUpvoted, Conflict, NotFound
from agentboard.models import UpvoteRecord
from agentboard.services.upvote_service import UpvoteService


@pytest.fixture()
def service(db_session, clock) -> UpvoteService:
    return UpvoteService(db_session, clock=clock)


def test_upvote_increments_once(service, test_post) -> None:
    assert service.upvote(test_post.id, "10.0.0.1").upvotes == 1
    with pytest.raises(AlreadyUpvoted):
        service.upvote(test_post.id, "10.0.0.1")
    assert service.upvote(test_post.id, "10.0.0.2").upvotes == 2


def test_already_upvoted_is_a_conflict() -> None:
    exc = AlreadyUpvoted(1, "10.0.0.1")
    assert isinstance(exc, Conflict)
    assert exc.status_code == 400
    assert exc.message == "Already upvoted"


def test_upvote_missing_post(service) -> None:
    with pytest.raises(NotFound):
        service.upvote(999, "10.0.0.1")


def test_unique_constraint_catches_race(service, db_session, test_post) -> None:
    """A concurrent upvote that slips past the pre-check is still rejected."""
    service.upvote(test_post.id, "10.0.0.1")

    with patch.object(service.upvotes, "exists", return_value=False):
        with pytest.raises(AlreadyUpvoted):
            service.upvote(test_post.id, "10.0.0.1")

    db_session.expire_all()
    assert db_session.query(UpvoteRecord).count() == 1
    assert service.posts.get_by_id(test_post.id).upvotes == 1


def test_increment_is_store_side(service, db_session, make_post) -> None:
    post = make_post("counted", upvotes=5)
    assert service.posts.increment_upvotes(post.id) == 1
    assert service.posts.increment_upvotes(post.id + 1000) == 0
    db_session.commit()
    db_session.refresh(post)
    assert post.upvotes == 6
