"""Resolve who receives the notifications produced by an event."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Protocol

from insyd_notify.config import get_settings
from insyd_notify.domain.entities import Post


class RecipientResolver(Protocol):
    """Return the user identifiers subscribed to ``post``'s author."""

    def subscribers_of(self, post: Post) -> list[str]: ...


class StaticRosterResolver:
    """Every user on a fixed roster follows everyone else on it."""

    def __init__(self, roster: Iterable[str]) -> None:
        self._roster = [user for user in dict.fromkeys(roster) if user]

    @property
    def roster(self) -> list[str]:
        return list(self._roster)

    def subscribers_of(self, post: Post) -> list[str]:
        return [user for user in self._roster if user != post.user_id]


def default_recipient_resolver() -> RecipientResolver:
    """Return a resolver built from the configured ``DEMO_USERS`` roster."""

    return StaticRosterResolver(get_settings().demo_users)


__all__ = [
    "RecipientResolver",
    "StaticRosterResolver",
    "default_recipient_resolver",
]
