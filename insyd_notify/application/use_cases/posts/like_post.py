"""Use case for liking a post."""

from __future__ import annotations

from sqlalchemy.orm import Session

from insyd_notify.application.use_cases.notifications import (
    InlineNotificationFanout,
    NotificationFanout,
)
from insyd_notify.domain.entities import Notification
from insyd_notify.domain.errors import NotFoundError, ValidationError
from insyd_notify.infrastructure.repositories import PostRepository

from ..identifiers import parse_record_id


def like_post(
    session: Session,
    *,
    post_id: int | str,
    actor_id: str | None,
    fanout: NotificationFanout | None = None,
) -> Notification | None:
    """Record a like as a notification for the post's author.

    Likes are events only; nothing is stored on the post itself. Returns the
    notification created, or ``None`` for a self-like.
    """

    if not actor_id or not actor_id.strip():
        raise ValidationError("actorId required")

    record_id = parse_record_id(post_id, not_found_message="Post not found")
    post = PostRepository(session).get(record_id)
    if post is None:
        raise NotFoundError("Post not found")
    return (fanout or InlineNotificationFanout()).on_post_liked(session, post, actor_id)
