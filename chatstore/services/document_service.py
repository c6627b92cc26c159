"""Document and suggestion queries.

Pruning a document's history removes suggestions on the doomed versions
before the versions themselves.
"""

import logging
from datetime import datetime
from typing import List, Optional

from ..core.security import utc_now
from ..database import Database
from ..repositories.base import Payload
from ..schemas.document import Document, Suggestion
from .operations import query_operation

logger = logging.getLogger(__name__)


@query_operation("save document in database")
def save_document(
    db: Database,
    id: str,
    title: str,
    kind: str,
    content: str,
    user_id: str,
) -> Document:
    """Store a new version of document *id*, stamped now."""
    return db.documents.create(
        {
            "id": id,
            "title": title,
            "kind": kind,
            "content": content,
            "user_id": user_id,
            "created_at": utc_now(),
        }
    )


@query_operation("get documents by id from database")
def get_documents_by_id(db: Database, id: str) -> List[Document]:
    return db.documents.find_all_by_id(id)


@query_operation("get document by id from database")
def get_document_by_id(db: Database, id: str) -> Optional[Document]:
    return db.documents.find_latest_by_id(id)


@query_operation("delete documents by id after timestamp from database")
def delete_documents_by_id_after_timestamp(db: Database, id: str, timestamp: datetime) -> List[Document]:
    """Drop every version newer than *timestamp* along with its suggestions."""
    suggestions = db.suggestions.delete_by_document_id_after_timestamp(id, timestamp)
    documents = db.documents.delete_by_id_after_timestamp(id, timestamp)
    if documents or suggestions:
        logger.info(
            "Document versions deleted after timestamp",
            extra={
                "doc_id": id,
                "versions_deleted": len(documents),
                "suggestions_deleted": len(suggestions),
            },
        )
    return documents


@query_operation("save suggestions in database")
def save_suggestions(db: Database, suggestions: List[Payload]) -> List[Suggestion]:
    return db.suggestions.save_many(suggestions)


@query_operation("get suggestions by document version from database")
def get_suggestions_by_document_id(db: Database, document_id: str) -> List[Suggestion]:
    return db.suggestions.find_by_document_id(document_id)
