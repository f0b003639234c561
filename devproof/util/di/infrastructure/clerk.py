"""Clerk infrastructure providers."""

from dishka import Scope, provide

from devproof.adapter.clerk import ClerkIdentityClient, RealClerkIdentityClient
from devproof.config import Settings
from devproof.util.di.base import ProviderBase
from devproof.util.error import ConfigurationError


class ClerkProvider(ProviderBase):
    """Clerk component base."""

    __mock_component__ = "clerk"


class ProdClerkProvider(ClerkProvider):
    """Production Clerk provider."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_clerk_client(self, settings: Settings) -> ClerkIdentityClient:
        """Provide Clerk backend API client.

        Returns:
            Clerk client

        Raises:
            ConfigurationError: If the Clerk secret key is not configured
        """
        if not settings.identity_provider.secret_key:
            raise ConfigurationError("Identity provider secret key must be configured")

        return RealClerkIdentityClient(
            api_url=settings.identity_provider.api_url,
            secret_key=settings.identity_provider.secret_key,
            timeout=settings.identity_provider.timeout,
        )
