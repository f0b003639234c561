"""Unit tests for UserService."""

import asyncio

import pytest
from sqlalchemy.exc import IntegrityError

from devproof.domain.error import NotFoundError
from devproof.domain.model import User
from devproof.domain.service import UserService
from devproof.domain.value import ExperienceLevel, UserId
from devproof.persistence.repository.inmemory import InMemoryUserRepository
from tests.conftest import make_profile, make_skill, make_user


class InterleavingUserRepository(InMemoryUserRepository):
    """Repository that yields after each lookup.

    Lets concurrent callers all observe "missing" before any of them inserts.
    """

    async def find_by_id(self, user_id: UserId) -> User | None:
        user = self._users.get(user_id)
        await asyncio.sleep(0)
        return user


class AlwaysConflictingUserRepository(InMemoryUserRepository):
    """Repository whose inserts always violate the unique key."""

    async def create(self, user: User) -> User:
        raise IntegrityError("Duplicate user id", None, Exception())


class TestGetOrCreate:
    """Tests for UserService.get_or_create()."""

    @pytest.mark.asyncio
    async def test_creates_user_with_fallbacks_for_blank_profile(self):
        """Missing email and blank names fall back to "" and "User"."""
        # Arrange
        user_repo = InMemoryUserRepository()
        service = UserService(user_repo)

        # Act
        user = await service.get_or_create(
            make_profile("u1", first_name="", last_name=None)
        )

        # Assert
        assert user.id == "u1"
        assert user.email == ""
        assert user.name == "User"
        assert user.avatar is None
        assert user.dream_companies == ""
        assert user.career_goals == ""
        assert user.experience == ExperienceLevel.BEGINNER
        assert user.reputation == 0
        assert user.skills == []
        assert user_repo.count() == 1

    @pytest.mark.asyncio
    async def test_creates_user_from_full_profile(self):
        """Email, name and avatar come from the provider profile."""
        # Arrange
        service = UserService(InMemoryUserRepository())

        # Act
        user = await service.get_or_create(
            make_profile(
                "u2",
                emails=["a@b.com", "other@b.com"],
                first_name="Ann",
                last_name="Lee",
                image_url="https://img.example.com/u2.png",
            )
        )

        # Assert
        assert user.email == "a@b.com"
        assert user.name == "Ann Lee"
        assert user.avatar == "https://img.example.com/u2.png"

    @pytest.mark.asyncio
    async def test_single_name_part_is_trimmed(self):
        """A lone first name has no trailing space."""
        service = UserService(InMemoryUserRepository())

        user = await service.get_or_create(make_profile("u3", first_name="Ann"))

        assert user.name == "Ann"

    @pytest.mark.asyncio
    async def test_second_resolution_returns_same_user(self):
        """Resolving twice returns the stored user and creates only one."""
        # Arrange
        user_repo = InMemoryUserRepository()
        service = UserService(user_repo)
        profile = make_profile("u1")

        # Act
        first = await service.get_or_create(profile)
        second = await service.get_or_create(profile)

        # Assert
        assert second == first
        assert second.skills == []
        assert user_repo.count() == 1

    @pytest.mark.asyncio
    async def test_existing_user_is_not_mutated(self):
        """Profile changes at the provider do not overwrite stored users."""
        # Arrange
        user_repo = InMemoryUserRepository()
        stored = make_user(
            "u1",
            email="old@example.com",
            name="Old Name",
            career_goals="Become a staff engineer",
            skills=[make_skill("u1", "Python", current_level=7)],
        )
        await user_repo.create(stored)
        service = UserService(user_repo)

        # Act
        user = await service.get_or_create(
            make_profile("u1", emails=["new@example.com"], first_name="New")
        )

        # Assert
        assert user == stored
        assert (await user_repo.find_by_id(UserId("u1"))) == stored
        assert [s.skill_name for s in user.skills] == ["Python"]

    @pytest.mark.asyncio
    async def test_concurrent_first_access_creates_one_user(self):
        """Concurrent resolutions of a new identity all return one stored user."""
        # Arrange
        user_repo = InterleavingUserRepository()
        service = UserService(user_repo)
        profile = make_profile("u-race", emails=["race@example.com"])

        # Act
        users = await asyncio.gather(
            *(service.get_or_create(profile) for _ in range(5))
        )

        # Assert
        assert user_repo.count() == 1
        assert {u.id for u in users} == {"u-race"}
        assert all(u == users[0] for u in users)

    @pytest.mark.asyncio
    async def test_conflict_without_stored_user_is_raised(self):
        """A unique key violation that isn't a concurrent insert propagates."""
        service = UserService(AlwaysConflictingUserRepository())

        with pytest.raises(IntegrityError):
            await service.get_or_create(make_profile("u1"))


class TestSave:
    """Tests for UserService.save()."""

    @pytest.mark.asyncio
    async def test_save_updates_profile_and_keeps_skills(self):
        """Saving changes profile fields without touching skills."""
        # Arrange
        user_repo = InMemoryUserRepository()
        stored = await user_repo.create(
            make_user("u1", skills=[make_skill("u1", "Go")])
        )
        service = UserService(user_repo)

        # Act
        saved = await service.save(
            stored.model_copy(update={"current_role": "SRE", "skills": []})
        )

        # Assert
        assert saved.current_role == "SRE"
        assert [s.skill_name for s in saved.skills] == ["Go"]

    @pytest.mark.asyncio
    async def test_save_unknown_user_raises(self):
        """Saving a user that was never created raises NotFoundError."""
        service = UserService(InMemoryUserRepository())

        with pytest.raises(NotFoundError):
            await service.save(make_user("ghost"))
