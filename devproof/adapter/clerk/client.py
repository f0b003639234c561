"""Clerk backend API client.

Fetches user records for identities that arrive with a verified session.
"""

import httpx
import logfire
from pydantic import ValidationError

from devproof.adapter.error import ProviderError
from devproof.domain.service.identity_service import IdentityProviderClient
from devproof.domain.value.types import IdentityProfile


class IdentityProviderError(ProviderError):
    """Identity provider could not answer a request."""

    pass


class ClerkIdentityClient(IdentityProviderClient):
    """Base class for Clerk clients.

    Provides type distinction for dependency injection.
    """

    pass


class RealClerkIdentityClient(ClerkIdentityClient):
    """Clerk backend API client."""

    def __init__(self, api_url: str, secret_key: str, timeout: float = 30.0) -> None:
        """Initialize Clerk client.

        Args:
            api_url: Backend API base URL (e.g. https://api.clerk.com/v1)
            secret_key: Backend API secret key
            timeout: Request timeout in seconds
        """
        self.api_url = api_url.rstrip("/")
        self.secret_key = secret_key
        self.timeout = timeout

    async def get_user(self, identity_id: str) -> IdentityProfile | None:
        """Fetch a user record from Clerk.

        Args:
            identity_id: Clerk user ID

        Returns:
            User record, or None if Clerk has no such user

        Raises:
            IdentityProviderError: If the request fails or the response is unusable
        """
        try:
            async with httpx.AsyncClient() as client:
                response = await client.get(
                    f"{self.api_url}/users/{identity_id}",
                    headers={
                        "Authorization": f"Bearer {self.secret_key}",
                        "Accept": "application/json",
                    },
                    timeout=self.timeout,
                )
        except httpx.HTTPError as e:
            logfire.error(
                "Clerk user request HTTP error", identity_id=identity_id, error=str(e)
            )
            raise IdentityProviderError(f"HTTP error fetching user: {e}")

        if response.status_code == 404:
            logfire.warn("Clerk user not found", identity_id=identity_id)
            return None

        if response.status_code != 200:
            logfire.error(
                "Clerk user request failed",
                identity_id=identity_id,
                status_code=response.status_code,
                error=response.text,
            )
            raise IdentityProviderError(
                f"User request failed: {response.status_code}"
            )

        try:
            return IdentityProfile.model_validate(response.json())
        except (ValueError, ValidationError) as e:
            logfire.error(
                "Clerk user response malformed", identity_id=identity_id, error=str(e)
            )
            raise IdentityProviderError(f"Malformed user response: {e}")


class MockClerkIdentityClient(ClerkIdentityClient):
    """Mock Clerk client for testing.

    Serves user records registered by the test instead of calling Clerk.
    """

    def __init__(self) -> None:
        """Initialize mock client with no known users."""
        self._profiles: dict[str, IdentityProfile] = {}

    def register(self, profile: IdentityProfile) -> None:
        """Make a user record available to ``get_user``."""
        self._profiles[profile.id] = profile

    def remove(self, identity_id: str) -> None:
        """Forget a user record."""
        self._profiles.pop(identity_id, None)

    async def get_user(self, identity_id: str) -> IdentityProfile | None:
        """Return the registered user record, if any."""
        return self._profiles.get(identity_id)
