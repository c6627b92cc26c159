"""Suggestion repository."""

from datetime import datetime
from typing import List

from ..schemas.base import ensure_utc
from ..schemas.document import Suggestion, SuggestionCreate
from .base import BaseRepository


class SuggestionRepository(BaseRepository[Suggestion]):
    """Repository for suggestions attached to document versions."""

    model_class = Suggestion
    create_schema = SuggestionCreate
    required_fields = (
        "document_id",
        "document_created_at",
        "original_text",
        "suggested_text",
        "user_id",
    )

    def find_by_document_id(self, document_id: str) -> List[Suggestion]:
        """Suggestions on any version of *document_id*, in insertion order."""
        return self._copies([s for s in self.store if s.document_id == document_id])

    def delete_by_document_id_after_timestamp(self, document_id: str, timestamp: datetime) -> List[Suggestion]:
        """Remove suggestions attached to versions newer than *timestamp*."""
        timestamp = ensure_utc(timestamp)
        removed = self.store.remove_where(
            lambda s: s.document_id == document_id and s.document_created_at > timestamp
        )
        return self._copies(removed)
