"""Tests for the Database composition root."""

from chatstore import Database, get_database
from tests.conftest import make_chat


class TestDatabase:
    """Composition root and the shared default instance."""

    def test_instances_are_independent(self):
        first, second = Database(), Database()
        make_chat(first)
        assert first.counts()["chats"] == 1
        assert second.counts()["chats"] == 0

    def test_default_instance_is_shared(self):
        assert get_database() is get_database()

    def test_counts_cover_every_store(self, db):
        assert db.counts() == {
            "users": 0,
            "chats": 0,
            "messages": 0,
            "votes": 0,
            "documents": 0,
            "suggestions": 0,
        }
