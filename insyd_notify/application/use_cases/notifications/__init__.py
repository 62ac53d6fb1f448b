"""Public helpers for emitting and reading notifications."""

from .events import (
    InlineNotificationFanout,
    NotificationFanout,
    build_post_created_notifications,
    build_post_liked_notification,
    notify_post_created,
    notify_post_liked,
)
from .list_notifications import list_notifications, resolve_limit
from .mark_read import mark_all_read, mark_read
from .recipients import (
    RecipientResolver,
    StaticRosterResolver,
    default_recipient_resolver,
)

__all__ = [
    "InlineNotificationFanout",
    "NotificationFanout",
    "RecipientResolver",
    "StaticRosterResolver",
    "build_post_created_notifications",
    "build_post_liked_notification",
    "default_recipient_resolver",
    "list_notifications",
    "mark_all_read",
    "mark_read",
    "notify_post_created",
    "notify_post_liked",
    "resolve_limit",
]
