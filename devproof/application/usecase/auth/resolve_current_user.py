"""Resolve current user use case."""

import logfire

from devproof.application.usecase.base import BaseUseCase
from devproof.domain.model import User
from devproof.domain.service import IdentityService, UserService
from devproof.domain.value import AuthContext


class ResolveCurrentUserUseCase(BaseUseCase):
    """Use case for resolving the caller to a stored user.

    Creates the user on the first authenticated request for an identity.
    """

    def __init__(
        self,
        identity_service: IdentityService,
        user_service: UserService,
    ) -> None:
        """Initialize resolve current user use case.

        Args:
            identity_service: Identity provider domain service
            user_service: User domain service
        """
        self.identity_service = identity_service
        self.user_service = user_service

    async def execute(self, request: AuthContext) -> User | None:
        """Execute current user resolution.

        Steps:
        1. Take the identity ID from the auth context
        2. Fetch the identity provider's profile for it
        3. Get the stored user (with skills), or create it from the profile

        Args:
            request: Authentication context of the current request

        Returns:
            The stored user, or None when the caller is not logged in or the
            identity provider has no record of them

        Raises:
            IdentityProviderError: If the identity provider could not be reached
        """
        if not request.identity_id:
            logfire.debug("No identity in auth context")
            return None

        with logfire.span("resolve_current_user", identity_id=request.identity_id):
            profile = await self.identity_service.get_profile(request.identity_id)
            if not profile:
                logfire.warn(
                    "Verified session without provider user record",
                    identity_id=request.identity_id,
                )
                return None

            return await self.user_service.get_or_create(profile)
