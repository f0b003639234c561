"""User domain service."""

import logfire
from sqlalchemy.exc import IntegrityError

from devproof.domain.model import User
from devproof.domain.model.common import utc_now
from devproof.domain.repository import UserRepository
from devproof.domain.value import IdentityProfile, UserId

from .base import Service


class UserService(Service):
    """Domain service for user operations."""

    def __init__(self, user_repository: UserRepository) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
        """
        self.user_repository = user_repository

    async def get_or_create(self, profile: IdentityProfile) -> User:
        """Get the user for an identity, creating it on first sight.

        Existing users are returned as stored. New users are built from the
        provider profile. If another request inserts the same ID between the
        lookup and the insert, the unique key rejects our insert and the
        stored user is returned instead.

        Args:
            profile: Identity provider profile of the caller

        Returns:
            The stored user, with skills
        """
        user_id = UserId(profile.id)

        with logfire.span("user_service.get_or_create", user_id=user_id):
            existing = await self.user_repository.find_by_id(user_id)
            if existing:
                logfire.info("Existing user resolved", user_id=user_id)
                return existing

            now = utc_now()
            user = User(
                id=user_id,
                email=profile.primary_email,
                name=profile.display_name,
                avatar=profile.image_url,
                dream_companies="",
                career_goals="",
                created_at=now,
                updated_at=now,
            )

            try:
                created = await self.user_repository.create(user)
            except IntegrityError:
                logfire.warn(
                    "User created by concurrent request, reading stored user",
                    user_id=user_id,
                )
                existing = await self.user_repository.find_by_id(user_id)
                if not existing:
                    raise
                return existing

            logfire.info("New user created", user_id=user_id, name=created.name)
            return created

    async def save(self, user: User) -> User:
        """Save profile changes of an existing user.

        Args:
            user: User to save

        Returns:
            Saved user

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("user_service.save", user_id=user.id):
            saved = await self.user_repository.save(user)
            logfire.info("User saved", user_id=saved.id)
            return saved
