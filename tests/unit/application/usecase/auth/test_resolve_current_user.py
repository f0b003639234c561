"""Unit tests for ResolveCurrentUserUseCase."""

from dishka import AsyncContainer
import pytest

from devproof.adapter.clerk import ClerkIdentityClient
from devproof.application.usecase.auth import ResolveCurrentUserUseCase
from devproof.domain.repository import UserRepository
from devproof.domain.value import AuthContext, UserId
from tests.conftest import make_profile, make_skill, make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestResolveCurrentUserUseCase:
    """Tests for ResolveCurrentUserUseCase."""

    @pytest.mark.asyncio
    async def test_no_identity_returns_none(self, unit_env: AsyncContainer):
        """A logged-out request resolves to no user without writing."""
        # Arrange
        use_case = await unit_env.get(ResolveCurrentUserUseCase)
        user_repo = await unit_env.get(UserRepository)

        # Act
        user = await use_case.execute(AuthContext.anonymous())

        # Assert
        assert user is None
        assert user_repo.count() == 0

    @pytest.mark.asyncio
    async def test_unknown_to_provider_returns_none(self, unit_env: AsyncContainer):
        """A verified session whose user the provider doesn't know is absent."""
        # Arrange
        use_case = await unit_env.get(ResolveCurrentUserUseCase)
        user_repo = await unit_env.get(UserRepository)

        # Act
        user = await use_case.execute(AuthContext(identity_id=UserId("user_gone")))

        # Assert
        assert user is None
        assert user_repo.count() == 0

    @pytest.mark.asyncio
    async def test_first_access_creates_user(self, unit_env: AsyncContainer):
        """The first authenticated request provisions the user."""
        # Arrange
        clerk = await unit_env.get(ClerkIdentityClient)
        clerk.register(
            make_profile("u2", emails=["a@b.com"], first_name="Ann", last_name="Lee")
        )
        use_case = await unit_env.get(ResolveCurrentUserUseCase)
        user_repo = await unit_env.get(UserRepository)

        # Act
        user = await use_case.execute(AuthContext(identity_id=UserId("u2")))

        # Assert
        assert user is not None
        assert user.id == "u2"
        assert user.email == "a@b.com"
        assert user.name == "Ann Lee"
        assert user.skills == []
        assert await user_repo.find_by_id(UserId("u2")) == user

    @pytest.mark.asyncio
    async def test_repeat_access_returns_stored_user(self, unit_env: AsyncContainer):
        """Re-resolving returns the same record, with its skills."""
        # Arrange
        clerk = await unit_env.get(ClerkIdentityClient)
        clerk.register(make_profile("u1"))
        user_repo = await unit_env.get(UserRepository)
        stored = await user_repo.create(
            make_user("u1", skills=[make_skill("u1", "TypeScript")])
        )
        use_case = await unit_env.get(ResolveCurrentUserUseCase)
        context = AuthContext(identity_id=UserId("u1"))

        # Act
        first = await use_case.execute(context)
        second = await use_case.execute(context)

        # Assert
        assert first == stored
        assert second == stored
        assert [s.skill_name for s in second.skills] == ["TypeScript"]
        assert user_repo.count() == 1
