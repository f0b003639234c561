"""Application layer DI providers."""

from dishka import Scope, provide

from devproof.application.usecase.auth import (
    GetAuthStatusUseCase,
    RequireAuthenticatedUserUseCase,
    ResolveCurrentUserUseCase,
)
from devproof.application.usecase.user import (
    GetUserProfileUseCase,
    UpdateUserProfileUseCase,
)
from devproof.config import ProfileSettings
from devproof.domain.service import IdentityService, SubmissionService, UserService
from devproof.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Auth use cases
    @provide(scope=Scope.REQUEST)
    def get_resolve_current_user_use_case(
        self, identity_service: IdentityService, user_service: UserService
    ) -> ResolveCurrentUserUseCase:
        """Provide resolve current user use case."""
        return ResolveCurrentUserUseCase(
            identity_service=identity_service, user_service=user_service
        )

    @provide(scope=Scope.REQUEST)
    def get_require_authenticated_user_use_case(
        self, resolve_current_user: ResolveCurrentUserUseCase
    ) -> RequireAuthenticatedUserUseCase:
        """Provide require authenticated user use case."""
        return RequireAuthenticatedUserUseCase(
            resolve_current_user=resolve_current_user
        )

    @provide(scope=Scope.REQUEST)
    def get_auth_status_use_case(
        self, resolve_current_user: ResolveCurrentUserUseCase
    ) -> GetAuthStatusUseCase:
        """Provide get auth status use case."""
        return GetAuthStatusUseCase(resolve_current_user=resolve_current_user)

    # User use cases
    @provide(scope=Scope.REQUEST)
    def get_get_user_profile_use_case(
        self,
        require_authenticated_user: RequireAuthenticatedUserUseCase,
        submission_service: SubmissionService,
        profile_settings: ProfileSettings,
    ) -> GetUserProfileUseCase:
        """Provide get user profile use case."""
        return GetUserProfileUseCase(
            require_authenticated_user=require_authenticated_user,
            submission_service=submission_service,
            profile_settings=profile_settings,
        )

    @provide(scope=Scope.REQUEST)
    def get_update_user_profile_use_case(
        self,
        require_authenticated_user: RequireAuthenticatedUserUseCase,
        user_service: UserService,
    ) -> UpdateUserProfileUseCase:
        """Provide update user profile use case."""
        return UpdateUserProfileUseCase(
            require_authenticated_user=require_authenticated_user,
            user_service=user_service,
        )
