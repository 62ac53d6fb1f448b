"""Translate SQLAlchemy failures into :class:`StorageFailure`."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from insyd_notify.domain.errors import StorageFailure


@contextmanager
def storage_errors(session: Session, action: str) -> Iterator[None]:
    """Roll back ``session`` and raise ``StorageFailure`` if ``action`` fails."""

    try:
        yield
    except SQLAlchemyError as exc:
        session.rollback()
        raise StorageFailure(f"Failed to {action}") from exc


__all__ = ["storage_errors"]
