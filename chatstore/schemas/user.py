"""User schemas."""

from typing import Optional

from pydantic import Field

from ..core.security import new_id
from .base import EntityModel, PartialModel


class User(EntityModel):
    """Stored user. ``password`` is always a hash."""
    id: str = Field(default_factory=new_id)
    email: str
    password: str


class UserCreate(PartialModel):
    """Schema for creating a user."""
    id: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None


class GuestUser(EntityModel):
    """What a guest sign-up hands back; never carries the password."""
    id: str
    email: str
