"""Aggregate application use cases."""

from .notifications import list_notifications, mark_all_read, mark_read
from .posts import create_post, like_post, list_posts

__all__ = [
    "create_post",
    "like_post",
    "list_notifications",
    "list_posts",
    "mark_all_read",
    "mark_read",
]
