"""Tests for paging through notifications and acknowledging them."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from insyd_notify.application.use_cases.notifications import (
    list_notifications,
    mark_all_read,
    mark_read,
    resolve_limit,
)
from insyd_notify.domain.entities import Notification, NotificationStatus
from insyd_notify.domain.errors import NotFoundError, ValidationError
from insyd_notify.infrastructure.repositories import NotificationRepository


def _seed(session, count, *, user_id="bob", start=None, step=timedelta(seconds=1)):
    start = start or datetime(2024, 1, 1, tzinfo=timezone.utc)
    notifications = [
        Notification(
            id=None,
            user_id=user_id,
            actor_id="alice",
            type="post",
            title=f"alice published a new post #{index}",
            created_at=start + step * index,
        )
        for index in range(count)
    ]
    return NotificationRepository(session).create_many(notifications)


@pytest.mark.parametrize(
    ("requested", "expected"),
    [
        (None, 50),
        ("", 50),
        ("abc", 50),
        ("0", 50),
        (-5, 50),
        (5, 5),
        ("20", 20),
        (100, 100),
        (500, 100),
        ("5.5", 5),
        ("10abc", 10),
        (" 7", 7),
        ("abc10", 50),
    ],
)
def test_resolve_limit(requested, expected):
    assert resolve_limit(requested) == expected


def test_list_notifications_requires_user(db_session):
    with pytest.raises(ValidationError):
        list_notifications(db_session, user_id=None)
    with pytest.raises(ValidationError):
        list_notifications(db_session, user_id="  ")


def test_list_returns_newest_first_within_limit(db_session):
    _seed(db_session, 10)

    feed = list_notifications(db_session, user_id="bob", limit=5)

    assert len(feed) == 5
    assert [n.title for n in feed] == [
        f"alice published a new post #{index}" for index in (9, 8, 7, 6, 5)
    ]
    timestamps = [n.created_at for n in feed]
    assert timestamps == sorted(timestamps, reverse=True)


def test_list_never_exceeds_the_server_maximum(db_session):
    _seed(db_session, 120, step=timedelta(milliseconds=10))

    assert len(list_notifications(db_session, user_id="bob", limit=1000)) == 100
    assert len(list_notifications(db_session, user_id="bob")) == 50


def test_equal_timestamps_fall_back_to_newest_id(db_session):
    saved = _seed(db_session, 3, step=timedelta(0))

    feed = list_notifications(db_session, user_id="bob")

    assert [n.id for n in feed] == sorted((n.id for n in saved), reverse=True)


def test_list_only_returns_the_users_notifications(db_session):
    _seed(db_session, 2, user_id="bob")
    _seed(db_session, 3, user_id="carol")

    assert {n.user_id for n in list_notifications(db_session, user_id="carol")} == {"carol"}


def test_mark_read_is_idempotent(db_session):
    (notification,) = _seed(db_session, 1)

    first = mark_read(db_session, notification.id)
    second = mark_read(db_session, notification.id)

    assert first.status is NotificationStatus.READ
    assert second.status is NotificationStatus.READ
    assert second.id == notification.id
    assert second.created_at == first.created_at


def test_mark_read_unknown_id(db_session):
    with pytest.raises(NotFoundError):
        mark_read(db_session, 12345)


def test_mark_all_read_counts_only_transitions(db_session):
    saved = _seed(db_session, 4)
    _seed(db_session, 2, user_id="carol")
    mark_read(db_session, saved[0].id)

    assert mark_all_read(db_session, user_id="bob") == 3
    assert mark_all_read(db_session, user_id="bob") == 0

    assert {
        n.status for n in list_notifications(db_session, user_id="carol")
    } == {NotificationStatus.UNREAD}
    assert all(
        n.status is NotificationStatus.READ
        for n in list_notifications(db_session, user_id="bob")
    )


def test_mark_all_read_requires_user(db_session):
    with pytest.raises(ValidationError):
        mark_all_read(db_session, user_id="")
