"""Persistence helpers for notification entities."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy import update
from sqlalchemy.orm import Session

from insyd_notify.domain.entities import EntityRef, Notification, NotificationStatus
from insyd_notify.infrastructure.models import NotificationModel
from insyd_notify.utils import (
    ensure_app_naive_datetime,
    ensure_app_timezone,
    now_in_app_timezone,
)

from .errors import storage_errors


class NotificationRepository:
    """Provide CRUD operations for :class:`Notification` objects."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list_for_user(
        self,
        user_id: str,
        *,
        limit: int | None = 50,
    ) -> Sequence[Notification]:
        query = self.session.query(NotificationModel)
        query = query.filter(NotificationModel.user_id == user_id)
        query = query.order_by(
            NotificationModel.created_at.desc(), NotificationModel.id.desc()
        )
        if limit is not None:
            query = query.limit(limit)
        with storage_errors(self.session, "list notifications"):
            models = query.all()
        return [self._to_entity(model) for model in models]

    def get(self, notification_id: int) -> Notification | None:
        with storage_errors(self.session, "load notification"):
            model = self.session.get(NotificationModel, notification_id)
        if model is None:
            return None
        return self._to_entity(model)

    def create(self, notification: Notification) -> Notification:
        saved = self.create_many([notification])
        return saved[0]

    def create_many(self, notifications: Sequence[Notification]) -> list[Notification]:
        """Insert ``notifications`` in a single commit.

        Either every row is persisted or, on failure, none is.
        """

        if not notifications:
            return []
        now = now_in_app_timezone()
        models = [self._to_model(notification, default_created_at=now) for notification in notifications]
        with storage_errors(self.session, "create notifications"):
            self.session.add_all(models)
            self.session.commit()
            for model in models:
                self.session.refresh(model)
        return [self._to_entity(model) for model in models]

    def mark_as_read(self, notification_id: int) -> Notification | None:
        """Set the notification to ``read`` and return it, or ``None`` if missing."""

        with storage_errors(self.session, "mark notification as read"):
            model = self.session.get(NotificationModel, notification_id)
            if model is None:
                return None
            current = self._to_entity(model)
            model.status = current.mark_read().status.value
            self.session.commit()
            self.session.refresh(model)
        return self._to_entity(model)

    def mark_all_as_read(self, user_id: str) -> int:
        """Move every unread notification of ``user_id`` to ``read``.

        Returns the number of rows that changed state.
        """

        statement = (
            update(NotificationModel)
            .where(
                NotificationModel.user_id == user_id,
                NotificationModel.status == NotificationStatus.UNREAD.value,
            )
            .values(status=NotificationStatus.READ.value)
            .execution_options(synchronize_session=False)
        )
        with storage_errors(self.session, "mark notifications as read"):
            result = self.session.execute(statement)
            self.session.commit()
        return result.rowcount or 0

    @staticmethod
    def _to_model(
        notification: Notification, *, default_created_at
    ) -> NotificationModel:
        return NotificationModel(
            user_id=notification.user_id,
            actor_id=notification.actor_id,
            type=notification.type.value,
            entity=notification.entity.as_dict() if notification.entity else None,
            title=notification.title,
            body=notification.body,
            status=notification.status.value,
            created_at=ensure_app_naive_datetime(
                notification.created_at or default_created_at
            ),
        )

    @staticmethod
    def _to_entity(model: NotificationModel) -> Notification:
        return Notification(
            id=model.id,
            user_id=model.user_id,
            actor_id=model.actor_id,
            type=model.type,
            entity=EntityRef.from_dict(model.entity),
            title=model.title,
            body=model.body or "",
            status=model.status,
            created_at=ensure_app_timezone(model.created_at),
        )


__all__ = ["NotificationRepository"]
