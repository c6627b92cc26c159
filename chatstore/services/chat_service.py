"""Chat queries, including the chat → messages → votes cascade."""

import logging
from typing import Optional

from ..core.config import settings
from ..core.security import utc_now
from ..database import Database
from ..schemas.chat import Chat, ChatPage, Visibility
from .operations import query_operation

logger = logging.getLogger(__name__)


@query_operation("save chat in database")
def save_chat(
    db: Database,
    id: str,
    user_id: str,
    title: str,
    visibility: Visibility = "private",
) -> Chat:
    return db.chats.create(
        {
            "id": id,
            "user_id": user_id,
            "title": title,
            "visibility": visibility,
            "created_at": utc_now(),
        }
    )


@query_operation("delete chat by id from database")
def delete_chat_by_id(db: Database, id: str) -> Optional[Chat]:
    """Delete a chat with its messages and their votes.

    Votes go first, then each message, then the chat itself. Returns the
    removed chat, or None if it did not exist.
    """
    message_ids = [message.id for message in db.messages.find_by_chat_id(id)]
    if message_ids:
        db.votes.delete_by_chat_id_and_message_ids(id, message_ids)

    for message_id in message_ids:
        db.messages.delete(message_id)

    chat = db.chats.delete(id)
    if chat is not None:
        logger.info(
            "Chat deleted",
            extra={"chat_id": id, "messages_deleted": len(message_ids)},
        )
    return chat


@query_operation("get chats by user from database")
def get_chats_by_user_id(
    db: Database,
    id: str,
    limit: Optional[int] = None,
    starting_after: Optional[str] = None,
    ending_before: Optional[str] = None,
) -> ChatPage:
    if limit is None:
        limit = settings.default_page_limit
    return db.chats.find_by_user_id(id, limit, starting_after, ending_before)


@query_operation("get chat by id from database")
def get_chat_by_id(db: Database, id: str) -> Optional[Chat]:
    return db.chats.find_by_id(id)


@query_operation("update chat visibility in database")
def update_chat_visibility_by_id(db: Database, chat_id: str, visibility: Visibility) -> Optional[Chat]:
    return db.chats.update_visibility(chat_id, visibility)
