"""Repository implementations for infrastructure layer."""

from .notification_repository import NotificationRepository
from .post_repository import PostRepository

__all__ = [
    "NotificationRepository",
    "PostRepository",
]
