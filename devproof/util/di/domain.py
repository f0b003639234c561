"""Domain layer DI providers."""

from dishka import Scope, provide

from devproof.config import AuthSettings
from devproof.domain.repository import SubmissionRepository, UserRepository
from devproof.domain.service import (
    IdentityProviderClient,
    IdentityService,
    SessionService,
    SubmissionService,
    UserService,
)
from devproof.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_session_service(self, auth_settings: AuthSettings) -> SessionService:
        """Provide session token domain service."""
        return SessionService(auth_settings=auth_settings)

    @provide
    def get_identity_service(
        self, identity_provider_client: IdentityProviderClient
    ) -> IdentityService:
        """Provide identity provider domain service."""
        return IdentityService(identity_provider_client=identity_provider_client)

    @provide
    def get_user_service(self, user_repository: UserRepository) -> UserService:
        """Provide user domain service."""
        return UserService(user_repository=user_repository)

    @provide
    def get_submission_service(
        self, submission_repository: SubmissionRepository
    ) -> SubmissionService:
        """Provide submission domain service."""
        return SubmissionService(submission_repository=submission_repository)
