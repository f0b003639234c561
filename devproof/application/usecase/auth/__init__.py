"""Authentication use cases."""

from .get_auth_status import GetAuthStatusUseCase
from .require_authenticated_user import RequireAuthenticatedUserUseCase
from .resolve_current_user import ResolveCurrentUserUseCase

__all__ = [
    "GetAuthStatusUseCase",
    "RequireAuthenticatedUserUseCase",
    "ResolveCurrentUserUseCase",
]
