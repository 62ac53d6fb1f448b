"""Use cases for acknowledging notifications."""

from __future__ import annotations

import logging

from sqlalchemy.orm import Session

from insyd_notify.domain.entities import Notification
from insyd_notify.domain.errors import NotFoundError, ValidationError
from insyd_notify.infrastructure.repositories import NotificationRepository

from ..identifiers import parse_record_id

logger = logging.getLogger(__name__)


def mark_read(session: Session, notification_id: int | str) -> Notification:
    """Mark one notification as read; repeating the call is harmless."""

    record_id = parse_record_id(notification_id, not_found_message="Not found")
    notification = NotificationRepository(session).mark_as_read(record_id)
    if notification is None:
        raise NotFoundError("Not found")
    return notification


def mark_all_read(session: Session, *, user_id: str | None) -> int:
    """Mark every unread notification of ``user_id`` as read.

    Returns how many notifications changed state.
    """

    if not user_id or not user_id.strip():
        raise ValidationError("userId is required")
    modified = NotificationRepository(session).mark_all_as_read(user_id)
    logger.info("Marked %d notifications as read for %s", modified, user_id)
    return modified


__all__ = ["mark_all_read", "mark_read"]
