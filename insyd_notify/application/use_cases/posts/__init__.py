"""Use cases for publishing and liking posts."""

from .create_post import create_post
from .like_post import like_post
from .list_posts import list_posts

__all__ = [
    "create_post",
    "like_post",
    "list_posts",
]
