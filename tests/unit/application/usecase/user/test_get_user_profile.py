"""Unit tests for GetUserProfileUseCase."""

from datetime import datetime, timedelta, timezone

from dishka import AsyncContainer
import pytest

from devproof.adapter.clerk import ClerkIdentityClient
from devproof.application.usecase.auth import RequireAuthenticatedUserUseCase
from devproof.application.usecase.user import GetUserProfileUseCase
from devproof.config import ProfileSettings
from devproof.domain.error import UnauthorizedError
from devproof.domain.repository import SubmissionRepository, UserRepository
from devproof.domain.service import SubmissionService
from devproof.domain.value import AuthContext, UserId
from tests.conftest import make_profile, make_skill, make_submission, make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestGetUserProfileUseCase:
    """Tests for GetUserProfileUseCase."""

    @pytest.mark.asyncio
    async def test_logged_out_raises_unauthorized(self, unit_env: AsyncContainer):
        use_case = await unit_env.get(GetUserProfileUseCase)

        with pytest.raises(UnauthorizedError):
            await use_case.execute(AuthContext.anonymous())

    @pytest.mark.asyncio
    async def test_new_user_gets_empty_profile(self, unit_env: AsyncContainer):
        """First visit to the dashboard provisions an empty profile."""
        # Arrange
        clerk = await unit_env.get(ClerkIdentityClient)
        clerk.register(
            make_profile("u2", emails=["a@b.com"], first_name="Ann", last_name="Lee")
        )
        use_case = await unit_env.get(GetUserProfileUseCase)

        # Act
        response = await use_case.execute(AuthContext(identity_id=UserId("u2")))

        # Assert
        assert response.user.id == "u2"
        assert response.user.name == "Ann Lee"
        assert response.user.email == "a@b.com"
        assert response.user.skills == []
        assert response.user.submissions == []

    @pytest.mark.asyncio
    async def test_profile_includes_skills_and_recent_submissions(
        self, unit_env: AsyncContainer
    ):
        """Skills and newest-first submissions are aggregated."""
        # Arrange
        clerk = await unit_env.get(ClerkIdentityClient)
        clerk.register(make_profile("u1"))
        user_repo = await unit_env.get(UserRepository)
        submission_repo = await unit_env.get(SubmissionRepository)

        await user_repo.create(
            make_user(
                "u1",
                current_role="Backend Engineer",
                reputation=42,
                skills=[make_skill("u1", "Python", current_level=6)],
            )
        )
        now = datetime.now(timezone.utc)
        submission_repo.add(
            make_submission("u1", now - timedelta(days=2), title="Older")
        )
        submission_repo.add(make_submission("u1", now, title="Newest"))
        submission_repo.add(make_submission("someone-else", now))

        use_case = await unit_env.get(GetUserProfileUseCase)

        # Act
        response = await use_case.execute(AuthContext(identity_id=UserId("u1")))

        # Assert
        assert response.user.current_role == "Backend Engineer"
        assert response.user.reputation == 42
        assert [s.skill_name for s in response.user.skills] == ["Python"]
        assert [s.proof.title for s in response.user.submissions] == [
            "Newest",
            "Older",
        ]

    @pytest.mark.asyncio
    async def test_submission_limit_is_applied(self, unit_env: AsyncContainer):
        """Only the configured number of submissions is returned."""
        # Arrange
        clerk = await unit_env.get(ClerkIdentityClient)
        clerk.register(make_profile("u1"))
        submission_repo = await unit_env.get(SubmissionRepository)
        now = datetime.now(timezone.utc)
        for i in range(5):
            submission_repo.add(
                make_submission("u1", now - timedelta(hours=i), title=f"Proof {i}")
            )

        use_case = GetUserProfileUseCase(
            require_authenticated_user=await unit_env.get(
                RequireAuthenticatedUserUseCase
            ),
            submission_service=await unit_env.get(SubmissionService),
            profile_settings=ProfileSettings(recent_submissions_limit=3),
        )

        # Act
        response = await use_case.execute(AuthContext(identity_id=UserId("u1")))

        # Assert
        assert [s.proof.title for s in response.user.submissions] == [
            "Proof 0",
            "Proof 1",
            "Proof 2",
        ]

    @pytest.mark.asyncio
    async def test_response_uses_camel_case_keys(self, unit_env: AsyncContainer):
        clerk = await unit_env.get(ClerkIdentityClient)
        clerk.register(make_profile("u1"))
        submission_repo = await unit_env.get(SubmissionRepository)
        submission_repo.add(
            make_submission("u1", datetime.now(timezone.utc), final_score=91)
        )
        use_case = await unit_env.get(GetUserProfileUseCase)

        response = await use_case.execute(AuthContext(identity_id=UserId("u1")))
        document = response.model_dump(by_alias=True)

        assert {"dreamCompanies", "careerGoals", "currentRole"} <= set(
            document["user"]
        )
        assert document["user"]["submissions"][0]["finalScore"] == 91
        assert "submittedAt" in document["user"]["submissions"][0]
