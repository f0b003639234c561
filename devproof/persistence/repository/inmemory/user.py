"""In-memory user repository for testing."""

from typing import Optional

from sqlalchemy.exc import IntegrityError

from devproof.domain.error import NotFoundError
from devproof.domain.model.user import User
from devproof.domain.repository.user import UserRepository
from devproof.domain.value import UserId


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self) -> None:
        self._users: dict[UserId, User] = {}

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID, including its skills."""
        return self._users.get(user_id)

    async def create(self, user: User) -> User:
        """Insert a new user.

        Raises:
            IntegrityError: If a user with this ID already exists
        """
        if user.id in self._users:
            raise IntegrityError("Duplicate user id", None, Exception())

        self._users[user.id] = user
        return user

    async def save(self, user: User) -> User:
        """Update a user's profile fields, keeping stored skills.

        Raises:
            NotFoundError: If the user does not exist
        """
        existing = self._users.get(user.id)
        if not existing:
            raise NotFoundError("User", user.id)

        updated = user.model_copy(update={"skills": existing.skills})
        self._users[user.id] = updated
        return updated

    def count(self) -> int:
        """Number of stored users."""
        return len(self._users)
