"""Identity provider domain service."""

import logfire

from devproof.domain.value import IdentityProfile, UserId

from .base import Service


class IdentityProviderClient:
    """Identity provider backend API interface."""

    async def get_user(self, identity_id: str) -> IdentityProfile | None:
        """Fetch a user record from the identity provider.

        Args:
            identity_id: Provider user ID

        Returns:
            The provider's user record, or None if the provider has no such user
        """
        raise NotImplementedError


class IdentityService(Service):
    """Domain service for looking up users at the identity provider."""

    def __init__(self, identity_provider_client: IdentityProviderClient) -> None:
        """Initialize identity service.

        Args:
            identity_provider_client: Identity provider backend API client
        """
        self.identity_provider_client = identity_provider_client

    async def get_profile(self, identity_id: UserId) -> IdentityProfile | None:
        """Get the provider's profile for an identity.

        Args:
            identity_id: Provider user ID

        Returns:
            Provider profile, or None if the provider doesn't know the user

        Raises:
            IdentityProviderError: If the provider could not be reached
        """
        with logfire.span("identity_service.get_profile", identity_id=identity_id):
            profile = await self.identity_provider_client.get_user(identity_id)
            if profile:
                logfire.info("Identity profile found", identity_id=identity_id)
            else:
                logfire.warn("Identity profile not found", identity_id=identity_id)
            return profile
