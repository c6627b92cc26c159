"""User queries — lookup, registration and guest accounts.

Passwords are hashed before they reach the store and are never returned
from guest sign-up.
"""

import logging
from typing import List

from ..core.config import settings
from ..core.security import epoch_millis, hash_password, new_id
from ..database import Database
from ..schemas.user import GuestUser, User
from .operations import query_operation

logger = logging.getLogger(__name__)


@query_operation("get user from database")
def get_user(db: Database, email: str) -> List[User]:
    return db.users.find_by_email(email)


@query_operation("create user in database")
def create_user(db: Database, email: str, password: str) -> User:
    """Register a user, storing a bcrypt hash of *password*."""
    user = db.users.create({"email": email, "password": hash_password(password)})
    logger.info("User created", extra={"user_id": user.id})
    return user


@query_operation("create guest user in database")
def create_guest_user(db: Database) -> GuestUser:
    """Create a throwaway account named ``guest-<epoch millis>``.

    The password is the hash of a random id nobody knows, so the account
    can only be used through the session that created it.
    """
    email = f"{settings.guest_email_prefix}-{epoch_millis()}"
    user = db.users.create({"email": email, "password": hash_password(new_id())})
    logger.info("Guest user created", extra={"user_id": user.id})
    return GuestUser(id=user.id, email=user.email)
