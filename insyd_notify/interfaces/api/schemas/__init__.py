from .notification import EntityRefRead, MarkAllReadResult, NotificationRead
from .post import Acknowledgement, PostCreate, PostLike, PostRead

__all__ = [
    "Acknowledgement",
    "EntityRefRead",
    "MarkAllReadResult",
    "NotificationRead",
    "PostCreate",
    "PostLike",
    "PostRead",
]
