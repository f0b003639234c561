"""Update user profile use case."""

from datetime import datetime

from pydantic import BaseModel, Field, field_validator

from devproof.application.usecase.auth.require_authenticated_user import (
    RequireAuthenticatedUserUseCase,
)
from devproof.application.usecase.base import BaseUseCase, CamelModel
from devproof.application.usecase.user.schemas import UserInfo
from devproof.domain.model.common import utc_now
from devproof.domain.service import UserService
from devproof.domain.value import AuthContext, ExperienceLevel


class UpdateUserProfileRequest(BaseModel):
    """Update user profile request.

    Only fields that were explicitly set are applied. An explicit None
    clears ``current_role`` and empties ``dream_companies`` and
    ``career_goals``. Experience cannot be cleared.
    """

    context: AuthContext  # From the request's session
    current_role: str | None = Field(default=None, max_length=255)
    experience: ExperienceLevel | None = None
    dream_companies: str | None = Field(default=None, max_length=1000)
    career_goals: str | None = Field(default=None, max_length=2000)

    @field_validator("experience")
    @classmethod
    def experience_not_cleared(
        cls, value: ExperienceLevel | None
    ) -> ExperienceLevel | None:
        if value is None:
            raise ValueError("experience cannot be cleared")
        return value


class UpdateUserProfileResponse(CamelModel):
    """Update user profile response."""

    user: UserInfo
    updated_at: datetime


class UpdateUserProfileUseCase(BaseUseCase):
    """Use case for updating the current user's career profile.

    Users can update their current role, experience, dream companies and
    career goals. Identity fields (email, name, avatar) and reputation
    cannot be changed through this use case.
    """

    def __init__(
        self,
        require_authenticated_user: RequireAuthenticatedUserUseCase,
        user_service: UserService,
    ) -> None:
        """Initialize update user profile use case.

        Args:
            require_authenticated_user: Authenticated user guard
            user_service: User domain service
        """
        self.require_authenticated_user = require_authenticated_user
        self.user_service = user_service

    async def execute(
        self, request: UpdateUserProfileRequest
    ) -> UpdateUserProfileResponse:
        """Execute update user profile flow.

        Steps:
        1. Resolve the caller
        2. Update the fields that were provided
        3. Save updated user
        4. Return updated profile

        Args:
            request: Request with auth context and fields to update

        Returns:
            Updated user profile information

        Raises:
            UnauthorizedError: If the caller is not logged in
        """
        user = await self.require_authenticated_user.execute(request.context)

        # Fields not sent keep their stored value
        changes = request.model_dump(exclude={"context"}, exclude_unset=True)
        for field in ("dream_companies", "career_goals"):
            if field in changes and changes[field] is None:
                changes[field] = ""

        updated_user = user.model_copy(update={**changes, "updated_at": utc_now()})

        saved_user = await self.user_service.save(updated_user)

        return UpdateUserProfileResponse(
            user=UserInfo.from_domain(saved_user),
            updated_at=saved_user.updated_at,
        )
