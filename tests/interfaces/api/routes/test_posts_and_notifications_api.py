"""Integration tests for the post and notification endpoints."""

from __future__ import annotations

import logging

import pytest
from fastapi.testclient import TestClient

from insyd_notify.application.use_cases.notifications import (
    InlineNotificationFanout,
    StaticRosterResolver,
)
from insyd_notify.domain.errors import StorageFailure
from insyd_notify.interfaces.api.dependencies import get_notification_fanout


def _publish(client: TestClient, user_id: str = "alice", content: str = "Hello world") -> dict:
    response = client.post("/posts", json={"userId": user_id, "content": content})
    assert response.status_code == 201
    return response.json()


def _feed(client: TestClient, user_id: str, **params) -> list[dict]:
    response = client.get("/notifications", params={"userId": user_id, **params})
    assert response.status_code == 200
    return response.json()


def test_health_endpoint(client: TestClient) -> None:
    response = client.get("/")

    assert response.status_code == 200
    assert response.json() == {"ok": True, "service": "insyd-notify-server"}


def test_publish_post_fans_out_to_the_roster(client: TestClient) -> None:
    post = _publish(client)

    assert set(post) == {"id", "userId", "content", "createdAt"}
    assert post["userId"] == "alice"
    assert post["content"] == "Hello world"

    for user in ("bob", "carol", "dave"):
        (notification,) = _feed(client, user)
        assert notification["title"] == "alice published a new post"
        assert notification["body"] == "Hello world"
        assert notification["type"] == "post"
        assert notification["actorId"] == "alice"
        assert notification["status"] == "unread"
        assert notification["entity"] == {"kind": "post", "id": str(post["id"])}
        assert set(notification) == {
            "id",
            "userId",
            "type",
            "actorId",
            "entity",
            "title",
            "body",
            "status",
            "createdAt",
        }
    assert _feed(client, "alice") == []


@pytest.mark.parametrize(
    "payload",
    [{}, {"userId": "alice"}, {"content": "hi"}, {"userId": "", "content": "hi"}],
)
def test_publish_post_requires_user_and_content(client: TestClient, payload) -> None:
    response = client.post("/posts", json=payload)

    assert response.status_code == 400
    assert response.json()["detail"] == "userId and content are required"


def test_malformed_payload_is_a_bad_request(client: TestClient) -> None:
    response = client.post(
        "/posts", content="not json", headers={"content-type": "application/json"}
    )

    assert response.status_code == 400


def test_list_posts_newest_first(client: TestClient) -> None:
    first = _publish(client, content="first")
    second = _publish(client, user_id="bob", content="second")

    response = client.get("/posts")

    assert response.status_code == 200
    assert [post["id"] for post in response.json()] == [second["id"], first["id"]]


def test_like_notifies_the_author(client: TestClient) -> None:
    post = _publish(client)

    response = client.post(f"/posts/{post['id']}/like", json={"actorId": "bob"})

    assert response.status_code == 200
    assert response.json() == {"ok": True}
    alice_feed = _feed(client, "alice")
    assert len(alice_feed) == 1
    assert alice_feed[0]["title"] == "bob liked your post"
    assert alice_feed[0]["type"] == "like"
    # bob only has the post notification from alice
    assert [n["type"] for n in _feed(client, "bob")] == ["post"]


def test_self_like_is_silent(client: TestClient) -> None:
    post = _publish(client)

    response = client.post(f"/posts/{post['id']}/like", json={"actorId": "alice"})

    assert response.status_code == 200
    assert _feed(client, "alice") == []


def test_like_errors(client: TestClient) -> None:
    post = _publish(client)

    missing_actor = client.post(f"/posts/{post['id']}/like", json={})
    assert missing_actor.status_code == 400
    assert missing_actor.json()["detail"] == "actorId required"

    no_body = client.post(f"/posts/{post['id']}/like")
    assert no_body.status_code == 400

    missing_post = client.post("/posts/9999/like", json={"actorId": "bob"})
    assert missing_post.status_code == 404
    assert missing_post.json()["detail"] == "Post not found"


def test_notifications_require_user(client: TestClient) -> None:
    assert client.get("/notifications").status_code == 400
    assert client.patch("/notifications/read-all").status_code == 400


def test_limit_returns_newest_page(client: TestClient) -> None:
    for index in range(10):
        _publish(client, content=f"post {index}")

    feed = _feed(client, "bob", limit=5)

    assert [n["body"] for n in feed] == [f"post {index}" for index in (9, 8, 7, 6, 5)]
    assert all(n["status"] == "unread" for n in feed)
    assert [n["id"] for n in feed] == sorted((n["id"] for n in feed), reverse=True)


def test_non_numeric_limit_falls_back_to_default(client: TestClient) -> None:
    _publish(client)

    assert len(_feed(client, "bob", limit="lots")) == 1


def test_mark_read_and_read_all(client: TestClient) -> None:
    _publish(client, content="one")
    _publish(client, content="two")
    first, second = _feed(client, "bob")

    response = client.patch(f"/notifications/{first['id']}/read")
    assert response.status_code == 200
    assert response.json()["status"] == "read"
    assert response.json()["id"] == first["id"]

    again = client.patch(f"/notifications/{first['id']}/read")
    assert again.status_code == 200
    assert again.json()["status"] == "read"

    read_all = client.patch("/notifications/read-all", params={"userId": "bob"})
    assert read_all.status_code == 200
    assert read_all.json() == {"modifiedCount": 1}

    repeat = client.patch("/notifications/read-all", params={"userId": "bob"})
    assert repeat.json() == {"modifiedCount": 0}

    assert {n["status"] for n in _feed(client, "bob")} == {"read"}
    assert {n["status"] for n in _feed(client, "carol")} == {"unread"}


def test_mark_read_unknown_notification(client: TestClient) -> None:
    response = client.patch("/notifications/4242/read")

    assert response.status_code == 404


def test_roster_can_be_overridden(app, client: TestClient) -> None:
    app.dependency_overrides[get_notification_fanout] = lambda: InlineNotificationFanout(
        StaticRosterResolver(["alice", "zoe"])
    )

    _publish(client)

    assert len(_feed(client, "zoe")) == 1
    assert _feed(client, "bob") == []


class _FailingFanout:
    def __init__(self, error: Exception) -> None:
        self.error = error

    def on_post_created(self, session, post):
        raise self.error

    def on_post_liked(self, session, post, actor_id):
        raise self.error


def test_fanout_storage_failure_is_a_generic_server_error(app, client: TestClient) -> None:
    app.dependency_overrides[get_notification_fanout] = lambda: _FailingFanout(
        StorageFailure("Failed to create notifications")
    )

    response = client.post("/posts", json={"userId": "alice", "content": "Hello"})

    assert response.status_code == 500
    assert response.json() == {"detail": "Internal Server Error"}
    # The post was committed before fan-out started.
    assert [post["content"] for post in client.get("/posts").json()] == ["Hello"]


def test_unexpected_errors_do_not_leak_details(app) -> None:
    app.dependency_overrides[get_notification_fanout] = lambda: _FailingFanout(
        RuntimeError("secret connection string")
    )

    with TestClient(app, raise_server_exceptions=False) as client:
        response = client.post("/posts", json={"userId": "alice", "content": "Hello"})

    assert response.status_code == 500
    assert "secret" not in response.text


@pytest.mark.parametrize("bad_id", ["abc", "0", "-1", "99999999999999999999999"])
def test_unresolvable_ids_are_not_found(client: TestClient, bad_id: str) -> None:
    _publish(client)

    read = client.patch(f"/notifications/{bad_id}/read")
    assert read.status_code == 404
    assert read.json()["detail"] == "Not found"

    like = client.post(f"/posts/{bad_id}/like", json={"actorId": "bob"})
    assert like.status_code == 404
    assert like.json()["detail"] == "Post not found"


def test_failed_requests_are_access_logged(app, caplog) -> None:
    app.dependency_overrides[get_notification_fanout] = lambda: _FailingFanout(
        RuntimeError("fan-out exploded")
    )
    caplog.set_level(logging.INFO, logger="insyd_notify.access")

    with TestClient(app, raise_server_exceptions=False) as client:
        response = client.post("/posts", json={"userId": "alice", "content": "Hello"})

    assert response.status_code == 500
    access_lines = [
        record.getMessage()
        for record in caplog.records
        if record.name == "insyd_notify.access"
    ]
    assert any(line.startswith("POST /posts 500 ") for line in access_lines)


def test_successful_requests_are_access_logged(client: TestClient, caplog) -> None:
    caplog.set_level(logging.INFO, logger="insyd_notify.access")

    client.get("/posts")

    assert any(
        record.name == "insyd_notify.access"
        and record.getMessage().startswith("GET /posts 200 ")
        for record in caplog.records
    )
