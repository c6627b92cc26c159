"""Chat repository with cursor pagination."""

from typing import Optional

from ..exceptions import AnchorNotFoundError, ValidationError
from ..schemas.chat import Chat, ChatCreate, ChatPage, Visibility
from .base import BaseRepository


class ChatRepository(BaseRepository[Chat]):
    """Repository for chat CRUD and per-user pagination."""

    model_class = Chat
    create_schema = ChatCreate
    required_fields = ("title", "user_id")

    def _anchor(self, anchor_id: str) -> Chat:
        """Look the anchor up among all chats, not just the user's."""
        anchor = self.find_by_id(anchor_id)
        if anchor is None:
            raise AnchorNotFoundError(anchor_id)
        return anchor

    def find_by_user_id(
        self,
        user_id: str,
        limit: int,
        starting_after: Optional[str] = None,
        ending_before: Optional[str] = None,
    ) -> ChatPage:
        """Page through a user's chats, newest first.

        ``starting_after`` keeps chats strictly newer than the anchor chat,
        ``ending_before`` keeps chats strictly older. Only one cursor is
        honoured; ``starting_after`` wins when both are given. Chats sharing
        a ``created_at`` keep their insertion order so pages are stable.

        Raises AnchorNotFoundError if the cursor chat does not exist.
        """
        if limit < 0:
            raise ValidationError("limit must not be negative", field="limit")

        chats = [chat for chat in self.store if chat.user_id == user_id]
        # sorted() is stable, including with reverse=True
        chats = sorted(chats, key=lambda chat: chat.created_at, reverse=True)

        if starting_after:
            anchor = self._anchor(starting_after)
            chats = [chat for chat in chats if chat.created_at > anchor.created_at]
        elif ending_before:
            anchor = self._anchor(ending_before)
            chats = [chat for chat in chats if chat.created_at < anchor.created_at]

        page = chats[:limit + 1]
        has_more = len(page) > limit
        return ChatPage(chats=self._copies(page[:limit]), has_more=has_more)

    def update_visibility(self, chat_id: str, visibility: Visibility) -> Optional[Chat]:
        return self.update(chat_id, {"visibility": visibility})
