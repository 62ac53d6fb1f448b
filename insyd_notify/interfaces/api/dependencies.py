"""FastAPI dependency utilities."""

from insyd_notify.application.use_cases.notifications import (
    InlineNotificationFanout,
    NotificationFanout,
    default_recipient_resolver,
)


def get_notification_fanout() -> NotificationFanout:
    """Return the fan-out used by post endpoints.

    Override this dependency to plug in another recipient resolver or a
    queued fan-out.
    """

    return InlineNotificationFanout(default_recipient_resolver())


__all__ = ["get_notification_fanout"]
