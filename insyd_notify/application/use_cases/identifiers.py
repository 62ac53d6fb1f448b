"""Parse record identifiers taken from request paths."""

from __future__ import annotations

from insyd_notify.domain.errors import NotFoundError

# Primary keys are signed 64-bit integers starting at 1.
MAX_RECORD_ID = 2**63 - 1


def parse_record_id(raw: int | str, *, not_found_message: str) -> int:
    """Return ``raw`` as a primary key or raise :class:`NotFoundError`.

    Anything that cannot name a stored row (non-digits, zero, values beyond
    the 64-bit range) is reported as missing rather than malformed.
    """

    if isinstance(raw, int):
        value = raw
    else:
        text = raw.strip()
        if not text.isascii() or not text.isdigit():
            raise NotFoundError(not_found_message)
        value = int(text)
    if not 1 <= value <= MAX_RECORD_ID:
        raise NotFoundError(not_found_message)
    return value


__all__ = ["MAX_RECORD_ID", "parse_record_id"]
