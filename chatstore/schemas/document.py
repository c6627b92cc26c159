"""Document and suggestion schemas.

Documents are versioned: rows sharing an ``id`` form a version chain
ordered by ``created_at``. A suggestion points at one version through
``(document_id, document_created_at)``.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from ..core.security import new_id, utc_now
from .base import EntityModel, PartialModel, UtcDatetime


class Document(EntityModel):
    """One version of a document."""
    id: str = Field(default_factory=new_id)
    title: str
    kind: str = "text"  # artifact kind: text, code, image, sheet
    content: str = ""
    user_id: str
    created_at: UtcDatetime = Field(default_factory=utc_now)


class DocumentCreate(PartialModel):
    """Schema for creating a document version."""
    id: Optional[str] = None
    title: Optional[str] = None
    kind: Optional[str] = None
    content: Optional[str] = None
    user_id: Optional[str] = None
    created_at: Optional[datetime] = None


class Suggestion(EntityModel):
    """Edit suggestion attached to a document version."""
    id: str = Field(default_factory=new_id)
    document_id: str
    document_created_at: UtcDatetime
    original_text: str
    suggested_text: str
    description: Optional[str] = None
    is_resolved: bool = False
    user_id: str
    created_at: UtcDatetime = Field(default_factory=utc_now)


class SuggestionCreate(PartialModel):
    """Schema for creating a suggestion."""
    id: Optional[str] = None
    document_id: Optional[str] = None
    document_created_at: Optional[datetime] = None
    original_text: Optional[str] = None
    suggested_text: Optional[str] = None
    description: Optional[str] = None
    is_resolved: Optional[bool] = None
    user_id: Optional[str] = None
    created_at: Optional[datetime] = None
