"""Message schemas."""

from datetime import datetime
from typing import Any, List, Literal, Optional

from pydantic import Field

from ..core.security import new_id, utc_now
from .base import EntityModel, PartialModel, UtcDatetime

Role = Literal["user", "assistant", "system"]


class Message(EntityModel):
    """Stored message. ``parts`` and ``attachments`` are opaque JSON payloads."""
    id: str = Field(default_factory=new_id)
    chat_id: str
    role: Role
    parts: List[Any]
    attachments: List[Any]
    created_at: UtcDatetime = Field(default_factory=utc_now)


class MessageCreate(PartialModel):
    """Schema for creating a message."""
    id: Optional[str] = None
    chat_id: Optional[str] = None
    role: Optional[Role] = None
    parts: Optional[List[Any]] = None
    attachments: Optional[List[Any]] = None
    created_at: Optional[datetime] = None
