"""Message repository.

Counting a user's messages needs the chat table, so that join lives in
``services.message_service.get_message_count_by_user_id``.
"""

from datetime import datetime
from typing import List

from ..schemas.base import ensure_utc
from ..schemas.message import Message, MessageCreate
from .base import BaseRepository


class MessageRepository(BaseRepository[Message]):
    """Repository for message CRUD operations."""

    model_class = Message
    create_schema = MessageCreate
    required_fields = ("chat_id", "role", "parts", "attachments")

    def find_by_chat_id(self, chat_id: str) -> List[Message]:
        """Messages of a chat in conversation order (oldest first)."""
        messages = [message for message in self.store if message.chat_id == chat_id]
        return self._copies(sorted(messages, key=lambda message: message.created_at))

    def delete_by_chat_id_after_timestamp(self, chat_id: str, timestamp: datetime) -> List[Message]:
        """Remove and return messages of *chat_id* created at or after *timestamp*."""
        timestamp = ensure_utc(timestamp)
        removed = self.store.remove_where(
            lambda message: message.chat_id == chat_id and message.created_at >= timestamp
        )
        return self._copies(removed)
