"""SQLAlchemy model for persisted notifications."""

from sqlalchemy import Column, DateTime, Index, Integer, JSON, String, Text

from insyd_notify.domain.entities import NotificationStatus
from insyd_notify.infrastructure.database import Base
from insyd_notify.utils import now_in_app_naive_datetime


class NotificationModel(Base):
    """Database representation for user notifications."""

    __tablename__ = "notification"
    __table_args__ = (
        Index("ix_notification_user_created", "user_id", "created_at"),
        Index("ix_notification_user_status_created", "user_id", "status", "created_at"),
    )

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(String(120), nullable=False, index=True)
    actor_id = Column(String(120), nullable=False)
    type = Column(String(20), nullable=False)
    entity = Column(JSON, nullable=True)
    title = Column(String(200), nullable=False)
    body = Column(Text, nullable=False, default="")
    status = Column(
        String(10), nullable=False, default=NotificationStatus.UNREAD.value, index=True
    )
    created_at = Column(
        DateTime(), nullable=False, default=now_in_app_naive_datetime, index=True
    )


__all__ = ["NotificationModel"]
