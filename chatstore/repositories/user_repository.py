"""User repository.

The store does not enforce email uniqueness; find_by_email may return
several rows.
"""

from typing import List

from ..schemas.user import User, UserCreate
from .base import BaseRepository


class UserRepository(BaseRepository[User]):
    """Repository for user CRUD operations."""

    model_class = User
    create_schema = UserCreate
    required_fields = ("email", "password")

    def find_by_email(self, email: str) -> List[User]:
        """All users registered under *email*, in insertion order."""
        return self._copies([user for user in self.store if user.email == email])
