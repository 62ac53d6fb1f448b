"""Use case for reading a user's notification feed."""

from __future__ import annotations

import re
from collections.abc import Sequence

from sqlalchemy.orm import Session

from insyd_notify.config import get_settings
from insyd_notify.domain.entities import Notification
from insyd_notify.domain.errors import ValidationError
from insyd_notify.infrastructure.repositories import NotificationRepository

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _leading_int(value: int | str | None) -> int:
    if isinstance(value, int):
        return value
    match = _LEADING_INT.match(value or "")
    return int(match.group(1)) if match else 0


def resolve_limit(
    requested: int | str | None,
    *,
    default: int | None = None,
    maximum: int | None = None,
) -> int:
    """Return the page size actually used for ``requested``.

    Only the leading digits count, so ``"10abc"`` means 10 and ``"5.5"`` means 5.
    Missing, non-numeric and non-positive values fall back to ``default``; the
    result never exceeds ``maximum``.
    """

    settings = get_settings()
    default = default if default is not None else settings.notification_default_limit
    maximum = maximum if maximum is not None else settings.notification_max_limit

    value = _leading_int(requested)
    if value <= 0:
        value = default
    return min(value, maximum)


def list_notifications(
    session: Session,
    *,
    user_id: str | None,
    limit: int | str | None = None,
) -> Sequence[Notification]:
    """Return the newest notifications addressed to ``user_id``."""

    if not user_id or not user_id.strip():
        raise ValidationError("userId is required")
    repository = NotificationRepository(session)
    return repository.list_for_user(user_id, limit=resolve_limit(limit))


__all__ = ["list_notifications", "resolve_limit"]
