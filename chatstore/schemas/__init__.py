"""Pydantic schemas for stored records and create payloads."""

from .base import ensure_utc
from .user import User, UserCreate, GuestUser
from .chat import Chat, ChatCreate, ChatPage, Visibility
from .message import Message, MessageCreate, Role
from .vote import Vote, VoteCreate, VoteType
from .document import Document, DocumentCreate, Suggestion, SuggestionCreate

__all__ = [
    "ensure_utc",
    "User",
    "UserCreate",
    "GuestUser",
    "Chat",
    "ChatCreate",
    "ChatPage",
    "Visibility",
    "Message",
    "MessageCreate",
    "Role",
    "Vote",
    "VoteCreate",
    "VoteType",
    "Document",
    "DocumentCreate",
    "Suggestion",
    "SuggestionCreate",
]
