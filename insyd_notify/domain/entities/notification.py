"""Domain entity representing a user notification."""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime
from enum import Enum
from typing import Any, Final

from insyd_notify.domain.errors import ValidationError

BODY_MAX_LENGTH: Final[int] = 80


class NotificationType(str, Enum):
    """Kinds of events that can produce a notification."""

    POST = "post"
    LIKE = "like"
    # Reserved; no trigger emits these yet.
    COMMENT = "comment"
    OTHER = "other"


class NotificationStatus(str, Enum):
    """Read state of a notification. ``unread`` only ever moves to ``read``."""

    UNREAD = "unread"
    READ = "read"


@dataclass(frozen=True)
class EntityRef:
    """Pointer back to the object that triggered a notification."""

    kind: str
    id: str

    def as_dict(self) -> dict[str, str]:
        return {"kind": self.kind, "id": self.id}

    @classmethod
    def from_dict(cls, value: dict[str, Any] | None) -> EntityRef | None:
        if not value:
            return None
        return cls(kind=str(value.get("kind", "")), id=str(value.get("id", "")))


def truncate_body(text: str | None, limit: int = BODY_MAX_LENGTH) -> str:
    """Return the excerpt stored as a notification body."""

    if not text:
        return ""
    return text[:limit]


@dataclass
class Notification:
    """Information message delivered to a specific user.

    ``type`` and ``status`` accept either the enum members or their string
    values; anything outside the closed sets raises :class:`ValidationError`
    as soon as the entity is built.
    """

    id: int | None
    user_id: str
    actor_id: str
    type: NotificationType
    title: str
    body: str = ""
    entity: EntityRef | None = None
    status: NotificationStatus = NotificationStatus.UNREAD
    created_at: datetime | None = None

    def __post_init__(self) -> None:
        self.type = _coerce(NotificationType, self.type, "type")
        self.status = _coerce(NotificationStatus, self.status, "status")
        if not self.user_id:
            raise ValidationError("Notification recipient is required")
        if not self.actor_id:
            raise ValidationError("Notification actor is required")
        if not self.title or not self.title.strip():
            raise ValidationError("Notification title is required")
        self.body = truncate_body(self.body)

    @property
    def is_read(self) -> bool:
        return self.status is NotificationStatus.READ

    def mark_read(self) -> Notification:
        """Return a copy in the ``read`` state; already-read copies are unchanged."""

        if self.is_read:
            return self
        return replace(self, status=NotificationStatus.READ)


def _coerce(enum_cls, value, field_name: str):
    try:
        return enum_cls(value)
    except ValueError as exc:
        allowed = ", ".join(member.value for member in enum_cls)
        msg = f"Invalid notification {field_name} '{value}'. Expected one of: {allowed}"
        raise ValidationError(msg) from exc


__all__ = [
    "BODY_MAX_LENGTH",
    "EntityRef",
    "Notification",
    "NotificationStatus",
    "NotificationType",
    "truncate_body",
]
