"""Endpoints for reading and acknowledging notifications."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from insyd_notify.application.use_cases.notifications import (
    list_notifications as list_notifications_uc,
    mark_all_read as mark_all_read_uc,
    mark_read as mark_read_uc,
)
from insyd_notify.domain.entities import Notification
from insyd_notify.domain.errors import NotFoundError, ValidationError
from insyd_notify.infrastructure.database import get_db
from insyd_notify.interfaces.api.schemas import (
    EntityRefRead,
    MarkAllReadResult,
    NotificationRead,
)

router = APIRouter(prefix="/notifications", tags=["notifications"])


def _notification_to_schema(notification: Notification) -> NotificationRead:
    entity = notification.entity
    return NotificationRead(
        id=notification.id or 0,
        user_id=notification.user_id,
        type=notification.type,
        actor_id=notification.actor_id,
        entity=EntityRefRead(kind=entity.kind, id=entity.id) if entity else None,
        title=notification.title,
        body=notification.body,
        status=notification.status,
        created_at=notification.created_at,
    )


@router.get("", response_model=list[NotificationRead])
def list_notifications(
    user_id: str | None = Query(None, alias="userId"),
    limit: str | None = Query(None),
    db: Session = Depends(get_db),
) -> list[NotificationRead]:
    """Return the newest notifications for ``userId``, at most 100."""

    try:
        notifications = list_notifications_uc(db, user_id=user_id, limit=limit)
    except ValidationError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    return [_notification_to_schema(notification) for notification in notifications]


@router.patch("/read-all", response_model=MarkAllReadResult)
def mark_all_read(
    user_id: str | None = Query(None, alias="userId"),
    db: Session = Depends(get_db),
) -> MarkAllReadResult:
    """Mark every unread notification of ``userId`` as read."""

    try:
        modified = mark_all_read_uc(db, user_id=user_id)
    except ValidationError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    return MarkAllReadResult(modified_count=modified)


@router.patch("/{notification_id}/read", response_model=NotificationRead)
def mark_read(
    notification_id: str,
    db: Session = Depends(get_db),
) -> NotificationRead:
    """Mark a single notification as read and return it."""

    try:
        notification = mark_read_uc(db, notification_id)
    except NotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    return _notification_to_schema(notification)


__all__ = ["router"]
