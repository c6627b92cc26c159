"""Collaborators the store calls into: password hashing, ids, and the clock.

Password hashing uses bcrypt via passlib. Plaintext passwords are never
stored or logged.
"""

import uuid
from datetime import datetime, timezone

from passlib.hash import bcrypt

from .config import settings


def hash_password(plaintext: str) -> str:
    """Hash a plaintext password with bcrypt at the configured cost."""
    return bcrypt.using(rounds=settings.password_hash_rounds).hash(plaintext)


def verify_password(plaintext: str, hashed: str) -> bool:
    """Check a plaintext password against a stored bcrypt hash."""
    return bcrypt.verify(plaintext, hashed)


def new_id() -> str:
    """Random UUID4 string."""
    return str(uuid.uuid4())


def utc_now() -> datetime:
    """Timezone-aware current time in UTC."""
    return datetime.now(timezone.utc)


def epoch_millis(moment: datetime | None = None) -> int:
    """Milliseconds since the Unix epoch for *moment* (defaults to now)."""
    moment = moment or utc_now()
    return int(moment.timestamp() * 1000)
