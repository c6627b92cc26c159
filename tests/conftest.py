"""Shared test fixtures for the chatstore test suite.

Every test gets a fresh ``Database`` so no state leaks between tests. The
process-wide instance from ``get_database()`` is never touched here.
"""

import os

# Cheap bcrypt and readable logs before any chatstore import reads settings.
os.environ["PASSWORD_HASH_ROUNDS"] = "4"
os.environ["LOG_FORMAT"] = "text"

from datetime import datetime, timedelta, timezone

import pytest

from chatstore.database import Database

# Fixed reference instant so ordering tests don't depend on the wall clock.
T0 = datetime(2025, 1, 1, 12, 0, tzinfo=timezone.utc)


def at(seconds: float) -> datetime:
    """T0 shifted by *seconds*."""
    return T0 + timedelta(seconds=seconds)


@pytest.fixture()
def db() -> Database:
    """Per-test in-memory database."""
    return Database()


def make_chat(db: Database, user_id: str = "user-1", title: str = "Test Chat", **overrides):
    """Create and return a chat."""
    payload = {"user_id": user_id, "title": title}
    payload.update(overrides)
    return db.chats.create(payload)


def make_message(db: Database, chat_id: str, role: str = "user", **overrides):
    """Create and return a message in *chat_id*."""
    payload = {
        "chat_id": chat_id,
        "role": role,
        "parts": [{"type": "text", "text": "Hello"}],
        "attachments": [],
    }
    payload.update(overrides)
    return db.messages.create(payload)


def make_document(db: Database, doc_id: str = "doc-1", **overrides):
    """Create and return a document version."""
    payload = {
        "id": doc_id,
        "title": "Draft",
        "kind": "text",
        "content": "First draft.",
        "user_id": "user-1",
    }
    payload.update(overrides)
    return db.documents.create(payload)


def make_suggestion(db: Database, document, **overrides):
    """Create and return a suggestion on a specific document version."""
    payload = {
        "document_id": document.id,
        "document_created_at": document.created_at,
        "original_text": "First",
        "suggested_text": "Initial",
        "user_id": "user-1",
    }
    payload.update(overrides)
    return db.suggestions.create(payload)
