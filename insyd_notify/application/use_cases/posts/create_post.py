"""Use case for publishing posts."""

from __future__ import annotations

from sqlalchemy.orm import Session

from insyd_notify.application.use_cases.notifications import (
    InlineNotificationFanout,
    NotificationFanout,
)
from insyd_notify.domain.entities import Post
from insyd_notify.domain.errors import ValidationError
from insyd_notify.infrastructure.repositories import PostRepository


def create_post(
    session: Session,
    *,
    user_id: str | None,
    content: str | None,
    fanout: NotificationFanout | None = None,
) -> Post:
    """Persist a post and notify its author's subscribers.

    The post is committed before fan-out starts. When fan-out fails the post
    stays published and the error propagates to the caller.
    """

    if not user_id or not user_id.strip() or not content or not content.strip():
        raise ValidationError("userId and content are required")

    post = PostRepository(session).create(
        Post(id=None, user_id=user_id, content=content)
    )
    (fanout or InlineNotificationFanout()).on_post_created(session, post)
    return post
