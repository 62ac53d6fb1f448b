"""SQLAlchemy model for published posts."""

from sqlalchemy import Column, DateTime, Integer, String, Text

from insyd_notify.infrastructure.database import Base
from insyd_notify.utils import now_in_app_naive_datetime


class PostModel(Base):
    """Database representation of posts."""

    __tablename__ = "post"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(String(120), nullable=False)
    content = Column(Text, nullable=False)
    created_at = Column(
        DateTime(), nullable=False, default=now_in_app_naive_datetime, index=True
    )


__all__ = ["PostModel"]
