"""Turn post events into persisted notifications."""

from __future__ import annotations

import logging
from typing import Protocol

from sqlalchemy.orm import Session

from insyd_notify.domain.entities import (
    EntityRef,
    Notification,
    NotificationType,
    Post,
    truncate_body,
)
from insyd_notify.domain.errors import ValidationError
from insyd_notify.infrastructure.repositories import NotificationRepository

from .recipients import RecipientResolver, default_recipient_resolver

logger = logging.getLogger(__name__)


def _post_reference(post: Post) -> EntityRef:
    return EntityRef(kind="post", id=str(post.id))


def build_post_created_notifications(
    post: Post, recipients: list[str]
) -> list[Notification]:
    """Return one ``post`` notification per recipient, skipping the author."""

    title = f"{post.user_id} published a new post"
    body = truncate_body(post.content)
    return [
        Notification(
            id=None,
            user_id=recipient,
            actor_id=post.user_id,
            type=NotificationType.POST,
            entity=_post_reference(post),
            title=title,
            body=body,
        )
        for recipient in recipients
        if recipient != post.user_id
    ]


def build_post_liked_notification(post: Post, actor_id: str) -> Notification | None:
    """Return the notification for the author of ``post``; ``None`` on self-likes."""

    if actor_id == post.user_id:
        return None
    return Notification(
        id=None,
        user_id=post.user_id,
        actor_id=actor_id,
        type=NotificationType.LIKE,
        entity=_post_reference(post),
        title=f"{actor_id} liked your post",
        body=truncate_body(post.content),
    )


def notify_post_created(
    session: Session,
    *,
    post: Post,
    resolver: RecipientResolver | None = None,
) -> list[Notification]:
    """Fan a new post out to every subscriber of its author."""

    resolver = resolver or default_recipient_resolver()
    notifications = build_post_created_notifications(post, resolver.subscribers_of(post))
    if not notifications:
        logger.info("Post %s has no recipients; nothing to notify", post.id)
        return []
    saved = NotificationRepository(session).create_many(notifications)
    logger.info("Post %s by %s fanned out to %d users", post.id, post.user_id, len(saved))
    return saved


def notify_post_liked(
    session: Session, *, post: Post, actor_id: str | None
) -> Notification | None:
    """Notify the author of ``post`` that ``actor_id`` liked it."""

    if not actor_id or not actor_id.strip():
        raise ValidationError("actorId required")
    notification = build_post_liked_notification(post, actor_id)
    if notification is None:
        logger.debug("Ignoring self-like on post %s by %s", post.id, actor_id)
        return None
    return NotificationRepository(session).create(notification)


class NotificationFanout(Protocol):
    """Capability invoked synchronously whenever a post event happens."""

    def on_post_created(self, session: Session, post: Post) -> list[Notification]: ...

    def on_post_liked(
        self, session: Session, post: Post, actor_id: str
    ) -> Notification | None: ...


class InlineNotificationFanout:
    """Write notifications within the request that triggered them."""

    def __init__(self, resolver: RecipientResolver | None = None) -> None:
        self.resolver = resolver or default_recipient_resolver()

    def on_post_created(self, session: Session, post: Post) -> list[Notification]:
        return notify_post_created(session, post=post, resolver=self.resolver)

    def on_post_liked(
        self, session: Session, post: Post, actor_id: str
    ) -> Notification | None:
        return notify_post_liked(session, post=post, actor_id=actor_id)


__all__ = [
    "InlineNotificationFanout",
    "NotificationFanout",
    "build_post_created_notifications",
    "build_post_liked_notification",
    "notify_post_created",
    "notify_post_liked",
]
