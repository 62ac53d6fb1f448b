"""ORM models used by the application infrastructure."""

from .notification import NotificationModel
from .post import PostModel

__all__ = [
    "NotificationModel",
    "PostModel",
]
