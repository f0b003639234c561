"""Get user profile use case."""

from devproof.application.usecase.auth.require_authenticated_user import (
    RequireAuthenticatedUserUseCase,
)
from devproof.application.usecase.base import BaseUseCase, CamelModel
from devproof.application.usecase.user.schemas import (
    SubmissionInfo,
    UserInfo,
    UserProfileInfo,
)
from devproof.config import ProfileSettings
from devproof.domain.service import SubmissionService
from devproof.domain.value import AuthContext


class GetUserProfileResponse(CamelModel):
    """Aggregated profile document for the dashboard."""

    user: UserProfileInfo


class GetUserProfileUseCase(BaseUseCase):
    """Use case for the current user's dashboard profile."""

    def __init__(
        self,
        require_authenticated_user: RequireAuthenticatedUserUseCase,
        submission_service: SubmissionService,
        profile_settings: ProfileSettings,
    ) -> None:
        """Initialize get user profile use case.

        Args:
            require_authenticated_user: Authenticated user guard
            submission_service: Submission domain service
            profile_settings: Profile settings
        """
        self.require_authenticated_user = require_authenticated_user
        self.submission_service = submission_service
        self.profile_settings = profile_settings

    async def execute(self, request: AuthContext) -> GetUserProfileResponse:
        """Execute get user profile flow.

        Steps:
        1. Resolve the caller (creating the user on first access)
        2. Load the user's most recent submissions
        3. Return profile, skills and submissions

        Args:
            request: Authentication context of the current request

        Returns:
            Profile document

        Raises:
            UnauthorizedError: If the caller is not logged in
        """
        user = await self.require_authenticated_user.execute(request)

        submissions = await self.submission_service.list_recent(
            user.id, self.profile_settings.recent_submissions_limit
        )

        return GetUserProfileResponse(
            user=UserProfileInfo(
                **UserInfo.from_domain(user).model_dump(),
                submissions=[SubmissionInfo.from_domain(s) for s in submissions],
            )
        )
