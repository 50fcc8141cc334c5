import uuid
from datetime import datetime, timezone

import pytest
from fastapi.testclient import TestClient
from unittest.mock import AsyncMock

from backend.main import create_app
from backend.api.deps.dependencies import get_post_service


@pytest.fixture
def mock_post_service():
    return AsyncMock()


@pytest.fixture
def client(mock_post_service):
    app = create_app()
    app.dependency_overrides[get_post_service] = lambda: mock_post_service
    return TestClient(app)


def make_post(name="hello-halo", **overrides):
    now = datetime.now(timezone.utc)
    post = {
        "id": uuid.uuid4(),
        "name": name,
        "title": "Hello Halo",
        "permalink": f"/archives/{name}",
        "content": "<p>正文</p>",
        "excerpt": None,
        "excerpt_auto_generate": True,
        "annotations": {},
        "created_at": now,
        "updated_at": now,
    }
    post.update(overrides)
    return post


def test_upsert_post(client, mock_post_service):
    mock_post_service.upsert_post.return_value = make_post()

    response = client.post(
        "/api/v1/posts",
        json={"name": " hello-halo ", "title": "Hello Halo", "content": "<p>正文</p>"},
    )

    assert response.status_code == 200
    assert response.json()["name"] == "hello-halo"
    assert mock_post_service.upsert_post.call_args.kwargs["name"] == "hello-halo"


def test_upsert_post_rejects_whitespace_name(client, mock_post_service):
    response = client.post("/api/v1/posts", json={"name": "   "})

    assert response.status_code == 400
    mock_post_service.upsert_post.assert_not_called()


def test_upsert_post_rejects_blank_annotation_key(client, mock_post_service):
    response = client.post("/api/v1/posts", json={"name": "p", "annotations": {" ": "true"}})

    assert response.status_code == 400


def test_list_posts(client, mock_post_service):
    mock_post_service.list_posts.return_value = [make_post("a"), make_post("b")]

    response = client.get("/api/v1/posts?limit=2&offset=1")

    assert [p["name"] for p in response.json()] == ["a", "b"]
    mock_post_service.list_posts.assert_called_once_with(limit=2, offset=1)


def test_list_posts_rejects_bad_limit(client):
    response = client.get("/api/v1/posts?limit=0")

    assert response.status_code == 422


def test_get_missing_post(client, mock_post_service):
    mock_post_service.get_post.side_effect = ValueError("Post ghost does not exist")

    response = client.get("/api/v1/posts/ghost")

    assert response.status_code == 404
