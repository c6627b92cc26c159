"""Shared schema pieces."""

from datetime import datetime, timezone
from typing import Annotated

from pydantic import AfterValidator, BaseModel


def ensure_utc(value: datetime) -> datetime:
    """Treat naive datetimes as UTC so every stored instant is comparable."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


UtcDatetime = Annotated[datetime, AfterValidator(ensure_utc)]


class EntityModel(BaseModel):
    """Base for stored records. Unknown fields are rejected."""

    class Config:
        extra = "forbid"


class PartialModel(BaseModel):
    """Base for create payloads; every field optional, unknown fields rejected."""

    class Config:
        extra = "forbid"
