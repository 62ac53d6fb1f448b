"""Schemas for post endpoints."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model exposing camelCase keys on the wire."""

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, from_attributes=True
    )


class PostCreate(CamelModel):
    """Payload required to publish a post.

    Fields are optional here so that missing values reach the use case and are
    reported as 400 rather than 422.
    """

    user_id: str | None = None
    content: str | None = None


class PostLike(CamelModel):
    actor_id: str | None = None


class PostRead(CamelModel):
    id: int
    user_id: str
    content: str
    created_at: datetime


class Acknowledgement(BaseModel):
    ok: bool = True


__all__ = ["Acknowledgement", "CamelModel", "PostCreate", "PostLike", "PostRead"]
