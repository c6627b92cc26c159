"""Vote repository.

Votes are keyed by ``(chat_id, message_id)`` and have no id of their own,
so the single-key find_by_id/update/delete always return None. Use the
composite-key methods instead.
"""

from typing import Iterable, List, Optional

from ..schemas.vote import Vote, VoteCreate
from .base import BaseRepository, Payload


class VoteRepository(BaseRepository[Vote]):
    """Repository for message votes with upsert semantics."""

    model_class = Vote
    create_schema = VoteCreate
    required_fields = ("chat_id", "message_id", "is_upvoted")

    @staticmethod
    def _same_key(chat_id: str, message_id: str):
        return lambda vote: vote.chat_id == chat_id and vote.message_id == message_id

    def find_by_id(self, entity_id: str) -> Optional[Vote]:
        return None

    def update(self, entity_id: str, changes: Payload) -> Optional[Vote]:
        return None

    def delete(self, entity_id: str) -> Optional[Vote]:
        return None

    def create(self, item: Payload) -> Vote:
        """Insert a vote, replacing any existing vote on the same message."""
        vote = self._new_row(item)
        with self.store.lock:
            index = self.store.index_of(self._same_key(vote.chat_id, vote.message_id))
            if index == -1:
                self.store.append(vote)
            else:
                self.store.replace(index, vote)
        return self._copy(vote)

    def save_many(self, items: List[Payload]) -> List[Vote]:
        return [self.create(item) for item in items]

    def find_by_chat_id(self, chat_id: str) -> List[Vote]:
        return self._copies([vote for vote in self.store if vote.chat_id == chat_id])

    def find_by_message_id(self, message_id: str) -> Optional[Vote]:
        for vote in self.store:
            if vote.message_id == message_id:
                return self._copy(vote)
        return None

    def find_by_chat_id_and_message_id(self, chat_id: str, message_id: str) -> Optional[Vote]:
        for vote in self.store:
            if vote.chat_id == chat_id and vote.message_id == message_id:
                return self._copy(vote)
        return None

    def update_by_chat_id_and_message_id(
        self, chat_id: str, message_id: str, is_upvoted: bool
    ) -> Optional[Vote]:
        """Flip an existing vote. Returns None if the message was never voted on."""
        with self.store.lock:
            index = self.store.index_of(self._same_key(chat_id, message_id))
            if index == -1:
                return None
            vote = self.store.get(index).model_copy(update={"is_upvoted": is_upvoted})
            self.store.replace(index, vote)
            return self._copy(vote)

    def delete_by_chat_id_and_message_id(self, chat_id: str, message_id: str) -> Optional[Vote]:
        with self.store.lock:
            index = self.store.index_of(self._same_key(chat_id, message_id))
            if index == -1:
                return None
            return self._copy(self.store.pop(index))

    def delete_by_chat_id_and_message_ids(self, chat_id: str, message_ids: Iterable[str]) -> List[Vote]:
        """Bulk-remove the votes of *chat_id* on any of *message_ids*."""
        wanted = set(message_ids)
        if not wanted:
            return []
        removed = self.store.remove_where(
            lambda vote: vote.chat_id == chat_id and vote.message_id in wanted
        )
        return self._copies(removed)
