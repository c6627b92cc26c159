"""Tests for the user query functions: registration, lookup, guest accounts."""

from unittest.mock import patch

from chatstore.core.security import verify_password
from chatstore.schemas import GuestUser
from chatstore.services import create_guest_user, create_user, get_user


class TestCreateUser:
    """Registered users get a hashed password."""

    def test_password_is_hashed(self, db):
        user = create_user(db, "roman@example.com", "Spear#123")
        assert user.password != "Spear#123"
        assert verify_password("Spear#123", user.password)

    def test_lookup_by_email(self, db):
        created = create_user(db, "roman@example.com", "Spear#123")
        assert get_user(db, "roman@example.com") == [created]
        assert get_user(db, "nobody@example.com") == []

    def test_duplicate_emails_are_allowed(self, db):
        create_user(db, "dup@example.com", "one-password")
        create_user(db, "dup@example.com", "two-password")
        assert len(get_user(db, "dup@example.com")) == 2


class TestCreateGuestUser:
    """Guest accounts with generated credentials."""

    def test_email_uses_epoch_millis(self, db):
        with patch("chatstore.services.user_service.epoch_millis", return_value=1735732800000):
            guest = create_guest_user(db)
        assert guest.email == "guest-1735732800000"

    def test_returns_only_id_and_email(self, db):
        guest = create_guest_user(db)
        assert isinstance(guest, GuestUser)
        assert set(guest.model_dump()) == {"id", "email"}

    def test_guest_is_stored_with_hashed_password(self, db):
        guest = create_guest_user(db)
        stored = db.users.find_by_id(guest.id)
        assert stored.email == guest.email
        assert stored.password.startswith("$2")
