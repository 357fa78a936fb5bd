"""In-memory user repository for testing."""

from typing import Optional

from ask.domain.model import User
from ask.domain.repository import UserRepository
from ask.domain.value import UserId
from ask.domain.value.types import Handle

from .store import InMemoryDatabase


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self, db: InMemoryDatabase | None = None) -> None:
        self.db = db or InMemoryDatabase()
        self._users = self.db.users

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        return self._users.get(user_id)

    async def find_by_handle(self, handle: Handle) -> Optional[User]:
        """Find a user by handle."""
        for user in self._users.values():
            if user.handle == handle:
                return user
        return None

    async def save(self, user: User) -> User:
        """Save a user (create or update)."""
        self._users[user.id] = user
        return user
