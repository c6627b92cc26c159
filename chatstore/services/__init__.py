"""Query functions composing the repositories for the web backend."""

from .user_service import get_user, create_user, create_guest_user
from .chat_service import (
    save_chat,
    delete_chat_by_id,
    get_chats_by_user_id,
    get_chat_by_id,
    update_chat_visibility_by_id,
)
from .message_service import (
    save_messages,
    get_messages_by_chat_id,
    get_message_by_id,
    delete_messages_by_chat_id_after_timestamp,
    get_message_count_by_user_id,
)
from .vote_service import vote_message, get_votes_by_chat_id
from .document_service import (
    save_document,
    get_documents_by_id,
    get_document_by_id,
    delete_documents_by_id_after_timestamp,
    save_suggestions,
    get_suggestions_by_document_id,
)

__all__ = [
    "get_user",
    "create_user",
    "create_guest_user",
    "save_chat",
    "delete_chat_by_id",
    "get_chats_by_user_id",
    "get_chat_by_id",
    "update_chat_visibility_by_id",
    "save_messages",
    "get_messages_by_chat_id",
    "get_message_by_id",
    "delete_messages_by_chat_id_after_timestamp",
    "get_message_count_by_user_id",
    "vote_message",
    "get_votes_by_chat_id",
    "save_document",
    "get_documents_by_id",
    "get_document_by_id",
    "delete_documents_by_id_after_timestamp",
    "save_suggestions",
    "get_suggestions_by_document_id",
]
