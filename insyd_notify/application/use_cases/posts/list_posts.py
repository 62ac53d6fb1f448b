"""Use case for listing posts."""

from collections.abc import Sequence

from sqlalchemy.orm import Session

from insyd_notify.domain.entities import Post
from insyd_notify.infrastructure.repositories import PostRepository


def list_posts(session: Session) -> Sequence[Post]:
    """Return every post, newest first."""

    return PostRepository(session).list()
