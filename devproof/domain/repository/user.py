"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from devproof.domain.model.user import User
from devproof.domain.value import UserId


class UserRepository(ABC):
    """Repository for User aggregate.

    Defines the contract for user persistence operations.
    Implementations live in the persistence layer. Every user returned
    carries its skills.
    """

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID, including its skills.

        Args:
            user_id: The identity provider's user ID

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def create(self, user: User) -> User:
        """Insert a new user.

        The user ID is unique. Inserting an ID that already exists fails
        without modifying the stored user.

        Args:
            user: The user to insert

        Returns:
            The stored user, including its skills

        Raises:
            IntegrityError: If a user with this ID already exists
        """
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Update an existing user's profile fields.

        Skills are not written; they are owned by the grading side.

        Args:
            user: The user to update

        Returns:
            The updated user, including its skills

        Raises:
            NotFoundError: If the user does not exist
        """
        pass
