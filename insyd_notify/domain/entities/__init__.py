"""Domain entities exposed by the application."""

from .notification import (
    BODY_MAX_LENGTH,
    EntityRef,
    Notification,
    NotificationStatus,
    NotificationType,
    truncate_body,
)
from .post import Post

__all__ = [
    "BODY_MAX_LENGTH",
    "EntityRef",
    "Notification",
    "NotificationStatus",
    "NotificationType",
    "Post",
    "truncate_body",
]
