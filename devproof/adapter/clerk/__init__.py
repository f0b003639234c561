"""Clerk identity provider adapter."""

from .client import (
    ClerkIdentityClient,
    IdentityProviderError,
    MockClerkIdentityClient,
    RealClerkIdentityClient,
)

__all__ = [
    "ClerkIdentityClient",
    "IdentityProviderError",
    "MockClerkIdentityClient",
    "RealClerkIdentityClient",
]
