"""Identity provider infrastructure provider."""

from dishka import Scope, provide

from devproof.adapter.clerk import ClerkIdentityClient
from devproof.domain.service import IdentityProviderClient
from devproof.util.di.base import ProviderBase


class IdentityProviderAggregatorProvider(ProviderBase):
    """Provider that exposes the configured identity provider client."""

    scope = Scope.APP

    @provide(scope=Scope.APP)
    def get_identity_provider_client(
        self, clerk_client: ClerkIdentityClient
    ) -> IdentityProviderClient:
        """Provide the identity provider client used by the domain.

        Args:
            clerk_client: Clerk client (real or mock)

        Returns:
            Identity provider client
        """
        return clerk_client
