"""Timestamps for posts and notifications in the configured timezone."""

from __future__ import annotations

from datetime import datetime, timezone, tzinfo
from functools import lru_cache

from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from insyd_notify.config import get_settings


@lru_cache(maxsize=1)
def get_app_timezone() -> tzinfo:
    """Return the ``APP_TIMEZONE`` zone, or UTC when it cannot be resolved."""

    tz_name = (get_settings().app_timezone or "").strip()
    if not tz_name:
        return timezone.utc
    try:
        return ZoneInfo(tz_name)
    except (ZoneInfoNotFoundError, ValueError):
        return timezone.utc


def now_in_app_timezone() -> datetime:
    return datetime.now(tz=get_app_timezone())


def now_in_app_naive_datetime() -> datetime:
    """Column default: the current app-local time without ``tzinfo``."""

    return now_in_app_timezone().replace(tzinfo=None)


def ensure_app_timezone(value: datetime | None) -> datetime | None:
    """Attach or convert ``value`` to the app timezone.

    Naive values read back from SQLite are taken to be app-local already.
    """

    if value is None:
        return None
    tz = get_app_timezone()
    if value.tzinfo is None:
        return value.replace(tzinfo=tz)
    return value.astimezone(tz)


def ensure_app_naive_datetime(value: datetime | None) -> datetime | None:
    """Return ``value`` as the app-local naive datetime stored in the database."""

    localized = ensure_app_timezone(value)
    return localized.replace(tzinfo=None) if localized is not None else None
