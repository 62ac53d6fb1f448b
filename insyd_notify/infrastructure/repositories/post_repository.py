"""Persistence layer for posts."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy import desc
from sqlalchemy.orm import Session

from insyd_notify.domain.entities import Post
from insyd_notify.infrastructure.models import PostModel
from insyd_notify.utils import (
    ensure_app_naive_datetime,
    ensure_app_timezone,
    now_in_app_timezone,
)

from .errors import storage_errors


class PostRepository:
    """Provide create and read operations for :class:`Post` objects."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def create(self, post: Post) -> Post:
        model = PostModel(
            user_id=post.user_id,
            content=post.content,
            created_at=ensure_app_naive_datetime(post.created_at or now_in_app_timezone()),
        )
        with storage_errors(self.session, "create post"):
            self.session.add(model)
            self.session.commit()
            self.session.refresh(model)
        return self._to_entity(model)

    def get(self, post_id: int) -> Post | None:
        """Return a post by its primary key, if present."""

        with storage_errors(self.session, "load post"):
            model = self.session.get(PostModel, post_id)
        if model is None:
            return None
        return self._to_entity(model)

    def list(self) -> Sequence[Post]:
        """Return every post, newest first."""

        query = self.session.query(PostModel).order_by(
            desc(PostModel.created_at), desc(PostModel.id)
        )
        with storage_errors(self.session, "list posts"):
            models = query.all()
        return [self._to_entity(model) for model in models]

    @staticmethod
    def _to_entity(model: PostModel) -> Post:
        return Post(
            id=model.id,
            user_id=model.user_id,
            content=model.content,
            created_at=ensure_app_timezone(model.created_at),
        )


__all__ = ["PostRepository"]
