"""Pydantic models describing notification payloads."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field

from insyd_notify.domain.entities import NotificationStatus, NotificationType

from .post import CamelModel


class EntityRefRead(BaseModel):
    kind: str
    id: str


class NotificationRead(CamelModel):
    """Representation of a notification delivered to the client."""

    id: int
    user_id: str
    type: NotificationType
    actor_id: str
    entity: EntityRefRead | None = None
    title: str
    body: str = ""
    status: NotificationStatus
    created_at: datetime


class MarkAllReadResult(CamelModel):
    modified_count: int = Field(..., ge=0)


__all__ = ["EntityRefRead", "MarkAllReadResult", "NotificationRead"]
