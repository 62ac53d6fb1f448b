"""Routes for publishing, listing and liking posts."""

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from insyd_notify.application.use_cases.notifications import NotificationFanout
from insyd_notify.application.use_cases.posts import (
    create_post as create_post_uc,
    like_post as like_post_uc,
    list_posts as list_posts_uc,
)
from insyd_notify.domain.entities import Post
from insyd_notify.domain.errors import NotFoundError, ValidationError
from insyd_notify.infrastructure.database import get_db
from insyd_notify.interfaces.api.dependencies import get_notification_fanout
from insyd_notify.interfaces.api.schemas import (
    Acknowledgement,
    PostCreate,
    PostLike,
    PostRead,
)

router = APIRouter(prefix="/posts", tags=["posts"])


def _post_to_read_model(post: Post) -> PostRead:
    return PostRead.model_validate(post)


@router.post("", response_model=PostRead, status_code=status.HTTP_201_CREATED)
def create_post(
    payload: PostCreate,
    db: Session = Depends(get_db),
    fanout: NotificationFanout = Depends(get_notification_fanout),
) -> PostRead:
    """Publish a post and notify the author's subscribers."""

    try:
        post = create_post_uc(
            db, user_id=payload.user_id, content=payload.content, fanout=fanout
        )
    except ValidationError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    return _post_to_read_model(post)


@router.get("", response_model=list[PostRead])
def list_posts(db: Session = Depends(get_db)) -> list[PostRead]:
    """Return every post, newest first."""

    return [_post_to_read_model(post) for post in list_posts_uc(db)]


@router.post("/{post_id}/like", response_model=Acknowledgement)
def like_post(
    post_id: str,
    payload: PostLike | None = None,
    db: Session = Depends(get_db),
    fanout: NotificationFanout = Depends(get_notification_fanout),
) -> Acknowledgement:
    """Like a post, notifying its author unless they liked it themselves."""

    actor_id = payload.actor_id if payload is not None else None
    try:
        like_post_uc(db, post_id=post_id, actor_id=actor_id, fanout=fanout)
    except ValidationError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    except NotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    return Acknowledgement(ok=True)


__all__ = ["router"]
