"""In-memory database: one repository per entity type.

Build a ``Database`` in whatever wires the backend together and hand it to
the query functions in ``chatstore.services``. ``get_database()`` returns a
lazily created process-wide instance for callers that want a shared one.
"""

import logging
import threading
from typing import Optional

from .repositories import (
    ChatRepository,
    DocumentRepository,
    MessageRepository,
    SuggestionRepository,
    UserRepository,
    VoteRepository,
)

logger = logging.getLogger(__name__)


class Database:
    """Holds the repositories for users, chats, messages, votes, documents and suggestions."""

    def __init__(self):
        self.users = UserRepository()
        self.chats = ChatRepository()
        self.messages = MessageRepository()
        self.votes = VoteRepository()
        self.documents = DocumentRepository()
        self.suggestions = SuggestionRepository()

    def counts(self) -> dict[str, int]:
        """Row count per store, for diagnostics."""
        return {
            "users": len(self.users.store),
            "chats": len(self.chats.store),
            "messages": len(self.messages.store),
            "votes": len(self.votes.store),
            "documents": len(self.documents.store),
            "suggestions": len(self.suggestions.store),
        }


_default_db: Optional[Database] = None
_default_lock = threading.Lock()


def get_database() -> Database:
    """Process-wide Database, created on first use and never torn down."""
    global _default_db
    if _default_db is None:
        with _default_lock:
            if _default_db is None:
                _default_db = Database()
                logger.info("In-memory database initialized")
    return _default_db
