"""Data access repositories."""

from .base import BaseRepository
from .user_repository import UserRepository
from .chat_repository import ChatRepository
from .message_repository import MessageRepository
from .vote_repository import VoteRepository
from .document_repository import DocumentRepository
from .suggestion_repository import SuggestionRepository

__all__ = [
    "BaseRepository",
    "UserRepository",
    "ChatRepository",
    "MessageRepository",
    "VoteRepository",
    "DocumentRepository",
    "SuggestionRepository",
]
