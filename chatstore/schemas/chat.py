"""Chat schemas."""

from datetime import datetime
from typing import List, Literal, Optional

from pydantic import BaseModel, Field

from ..core.security import new_id, utc_now
from .base import EntityModel, PartialModel, UtcDatetime

Visibility = Literal["private", "public"]


class Chat(EntityModel):
    """Stored chat."""
    id: str = Field(default_factory=new_id)
    created_at: UtcDatetime = Field(default_factory=utc_now)
    title: str
    user_id: str
    visibility: Visibility = "private"


class ChatCreate(PartialModel):
    """Schema for creating a chat."""
    id: Optional[str] = None
    created_at: Optional[datetime] = None
    title: Optional[str] = None
    user_id: Optional[str] = None
    visibility: Optional[Visibility] = None


class ChatPage(BaseModel):
    """One page of a user's chats, newest first."""
    chats: List[Chat]
    has_more: bool
