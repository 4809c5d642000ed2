"""Tests for system endpoints."""

from fastapi import status
from fastapi.testclient import TestClient

from agentboard.models import CATEGORIES


def test_system_config(client: TestClient) -> None:
    r = client.get("/api/v1/system/config")
    assert r.status_code == status.HTTP_200_OK
    data = r.json()
    assert data["categories"] == list(CATEGORIES)
    assert data["limits"]["max_content_length"] == 5000
    assert data["limits"]["default_list_limit"] == 50
    assert data["rate_limit"] == {"window_seconds": 3600, "max_posts": 10}
    assert "database_url" not in str(data)


def test_system_health(client: TestClient) -> None:
    r = client.get("/api/v1/system/health")
    assert r.status_code == status.HTTP_200_OK
    data = r.json()
    assert data["status"] == "healthy"
    assert data["components"]["database"] == "healthy"


def test_activity_stats(client: TestClient, make_post) -> None:
    parent = make_post("parent")
    make_post("child", parent_id=parent.id)
    client.post(f"/api/v1/posts/{parent.id}/upvote", headers={"X-Forwarded-For": "10.1.1.1"})

    r = client.get("/api/v1/system/activity-stats")
    assert r.status_code == status.HTTP_200_OK
    assert r.json() == {"posts": 1, "replies": 1, "upvotes": 1, "rate_limit_events": 0}


def test_unknown_route_uses_error_body(client: TestClient) -> None:
    r = client.get("/api/v1/nope")
    assert r.status_code == status.HTTP_404_NOT_FOUND
    assert "error" in r.json()
