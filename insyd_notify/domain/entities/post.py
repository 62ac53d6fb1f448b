"""Domain entity representing a published post."""

from dataclasses import dataclass
from datetime import datetime


@dataclass
class Post:
    """Free-text content published by a user."""

    id: int | None
    user_id: str
    content: str
    created_at: datetime | None = None


__all__ = ["Post"]
