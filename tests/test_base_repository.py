"""Generic repository contract, exercised through the user and chat repositories.

Covers defaults, required fields, round trips, in-place update, delete,
and defensive copying of everything handed back to callers.
"""

import pytest

from chatstore.exceptions import MissingRequiredFieldError, ValidationError
from chatstore.schemas import Chat, ChatCreate, UserCreate
from tests.conftest import at, make_chat, make_message


class TestCreate:
    """Defaults, required fields and payload validation on create."""

    def test_generates_id_and_timestamp(self, db):
        chat = db.chats.create(ChatCreate(title="Hello", user_id="u1"))
        assert chat.id
        assert chat.created_at.tzinfo is not None
        assert chat.visibility == "private"

    def test_keeps_caller_id_and_timestamp(self, db):
        chat = make_chat(db, id="chat-1", created_at=at(5))
        assert chat.id == "chat-1"
        assert chat.created_at == at(5)

    def test_stored_model_keeps_its_defaulted_id_and_timestamp(self, db):
        chat = Chat(title="Hello", user_id="u1")
        created = db.chats.create(chat)
        assert created.id == chat.id
        assert created.created_at == chat.created_at
        assert db.chats.find_by_id(chat.id) == created

    def test_returned_record_can_be_stored_again_unchanged(self, db):
        original = make_chat(db, id="chat-1", created_at=at(5))
        stored_again = db.chats.create(original)
        assert stored_again == original

    def test_naive_timestamps_are_treated_as_utc(self, db):
        naive = at(5).replace(tzinfo=None)
        chat = make_chat(db, created_at=naive)
        assert chat.created_at == at(5)

    def test_explicit_none_falls_back_to_default(self, db):
        chat = make_chat(db, id=None, visibility=None)
        assert chat.id
        assert chat.visibility == "private"

    def test_missing_required_field_fails_fast(self, db):
        with pytest.raises(MissingRequiredFieldError) as exc_info:
            db.chats.create({"user_id": "u1"})
        assert exc_info.value.details == {"entity": "Chat", "field": "title"}
        assert db.chats.find_all() == []

    def test_missing_password_rejected(self, db):
        with pytest.raises(MissingRequiredFieldError):
            db.users.create(UserCreate(email="a@example.com"))

    def test_unknown_field_rejected(self, db):
        with pytest.raises(ValidationError):
            db.chats.create({"title": "t", "user_id": "u1", "colour": "blue"})

    def test_bad_enum_rejected(self, db):
        with pytest.raises(ValidationError) as exc_info:
            make_chat(db, visibility="secret")
        assert exc_info.value.details["field"] == "visibility"


class TestFind:
    """Lookups by key and full scans."""

    def test_round_trip(self, db):
        created = make_chat(db)
        assert db.chats.find_by_id(created.id) == created

    def test_absent_id_returns_none(self, db):
        assert db.chats.find_by_id("nope") is None

    def test_find_all_in_insertion_order(self, db):
        ids = [make_chat(db, created_at=at(10 - i)).id for i in range(3)]
        assert [c.id for c in db.chats.find_all()] == ids


class TestUpdate:
    """In-place merges of changed fields."""

    def test_merges_fields_in_place(self, db):
        chat = make_chat(db, title="Before")
        make_chat(db, title="Other")
        updated = db.chats.update(chat.id, {"title": "After"})
        assert updated.title == "After"
        assert updated.user_id == chat.user_id
        # position in the store is unchanged
        assert db.chats.find_all()[0].title == "After"

    def test_missing_row_returns_none(self, db):
        assert db.chats.update("nope", {"title": "x"}) is None

    def test_key_cannot_change(self, db):
        chat = make_chat(db)
        with pytest.raises(ValidationError):
            db.chats.update(chat.id, {"id": "other"})

    def test_invalid_value_leaves_row_untouched(self, db):
        chat = make_chat(db)
        with pytest.raises(ValidationError):
            db.chats.update(chat.id, {"visibility": "secret"})
        assert db.chats.find_by_id(chat.id).visibility == "private"


class TestDelete:
    """Removal by key."""

    def test_removes_and_returns_row(self, db):
        chat = make_chat(db)
        assert db.chats.delete(chat.id) == chat
        assert db.chats.find_by_id(chat.id) is None

    def test_missing_row_returns_none(self, db):
        assert db.chats.delete("nope") is None


class TestDefensiveCopies:
    """Records handed out never alias stored rows."""

    def test_mutating_created_record_does_not_touch_store(self, db):
        chat = make_chat(db, title="Original")
        chat.title = "Mutated"
        assert db.chats.find_by_id(chat.id).title == "Original"

    def test_mutating_nested_payload_does_not_touch_store(self, db):
        chat = make_chat(db)
        message = make_message(db, chat.id)
        fetched = db.messages.find_by_id(message.id)
        fetched.parts[0]["text"] = "tampered"
        fetched.attachments.append({"url": "x"})
        again = db.messages.find_by_id(message.id)
        assert again.parts[0]["text"] == "Hello"
        assert again.attachments == []

    def test_mutating_find_all_result_does_not_touch_store(self, db):
        make_chat(db)
        rows = db.chats.find_all()
        rows.clear()
        assert len(db.chats.find_all()) == 1
