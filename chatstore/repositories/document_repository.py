"""Document repository.

Documents are never edited in place. ``update`` appends a new version
with a fresh timestamp, and ``delete`` is a no-op; versions only go away
through ``delete_by_id_after_timestamp``.
"""

from datetime import datetime, timedelta
from typing import List, Optional

from ..core.security import utc_now
from ..schemas.base import ensure_utc
from ..schemas.document import Document, DocumentCreate
from .base import BaseRepository, Payload

# Smallest step datetime can represent. A new version is stamped at least
# this far after the latest one so the chain stays strictly ordered.
_CLOCK_TICK = timedelta(microseconds=1)


class DocumentRepository(BaseRepository[Document]):
    """Repository for versioned documents."""

    model_class = Document
    create_schema = DocumentCreate
    required_fields = ("title", "user_id")

    def _versions(self, doc_id: str) -> List[Document]:
        versions = [doc for doc in self.store if doc.id == doc_id]
        return sorted(versions, key=lambda doc: doc.created_at)

    def find_all_by_id(self, doc_id: str) -> List[Document]:
        """Every version of *doc_id*, oldest first."""
        return self._copies(self._versions(doc_id))

    def find_latest_by_id(self, doc_id: str) -> Optional[Document]:
        """Version with the greatest created_at, or None."""
        versions = self._versions(doc_id)
        return self._copy(versions[-1]) if versions else None

    def update(self, doc_id: str, changes: Payload) -> Optional[Document]:
        """Append a new version built from the latest one plus *changes*.

        A caller-supplied created_at is ignored: the new version is always
        stamped now (or one tick after the latest version if the clock has
        not moved past it).
        """
        changes = self._changes(changes)
        self._check_key_unchanged(doc_id, changes)
        changes.pop("created_at", None)
        with self.store.lock:
            versions = self._versions(doc_id)
            if not versions:
                return None
            latest = versions[-1]
            created_at = max(utc_now(), latest.created_at + _CLOCK_TICK)
            row = self._build({**latest.model_dump(), **changes, "created_at": created_at})
            self.store.append(row)
            return self._copy(row)

    def delete(self, doc_id: str) -> Optional[Document]:
        return None

    def delete_by_id_after_timestamp(self, doc_id: str, timestamp: datetime) -> List[Document]:
        """Remove and return versions of *doc_id* created strictly after *timestamp*."""
        timestamp = ensure_utc(timestamp)
        removed = self.store.remove_where(
            lambda doc: doc.id == doc_id and doc.created_at > timestamp
        )
        return self._copies(removed)
