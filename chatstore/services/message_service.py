"""Message queries, including the per-user rate-limit count."""

import logging
from datetime import datetime, timedelta
from typing import List

from ..core.security import utc_now
from ..database import Database
from ..repositories.base import Payload
from ..schemas.message import Message
from .operations import query_operation

logger = logging.getLogger(__name__)


@query_operation("save messages in database")
def save_messages(db: Database, messages: List[Payload]) -> List[Message]:
    return db.messages.save_many(messages)


@query_operation("get messages by chat id from database")
def get_messages_by_chat_id(db: Database, id: str) -> List[Message]:
    return db.messages.find_by_chat_id(id)


@query_operation("get message by id from database")
def get_message_by_id(db: Database, id: str) -> List[Message]:
    """Zero or one message, as a list."""
    message = db.messages.find_by_id(id)
    return [message] if message else []


@query_operation("delete messages by chat id after timestamp from database")
def delete_messages_by_chat_id_after_timestamp(
    db: Database, chat_id: str, timestamp: datetime
) -> List[Message]:
    """Delete messages created at or after *timestamp*, then their votes."""
    removed = db.messages.delete_by_chat_id_after_timestamp(chat_id, timestamp)
    if removed:
        db.votes.delete_by_chat_id_and_message_ids(chat_id, [m.id for m in removed])
        logger.info(
            "Messages deleted after timestamp",
            extra={"chat_id": chat_id, "messages_deleted": len(removed)},
        )
    return removed


@query_operation("get message count by user id")
def get_message_count_by_user_id(db: Database, id: str, difference_in_hours: float) -> int:
    """Count the user-authored messages sent in the last *difference_in_hours* hours.

    Joins through chats: a message belongs to the user when its chat does.
    Assistant and system messages are not counted.
    """
    cutoff = utc_now() - timedelta(hours=difference_in_hours)
    chat_ids = {chat.id for chat in db.chats.find_all() if chat.user_id == id}
    return sum(
        1
        for message in db.messages.find_all()
        if message.chat_id in chat_ids
        and message.created_at >= cutoff
        and message.role == "user"
    )
