"""Require authenticated user use case."""

from devproof.application.usecase.auth.resolve_current_user import (
    ResolveCurrentUserUseCase,
)
from devproof.application.usecase.base import BaseUseCase
from devproof.domain.error import UnauthorizedError
from devproof.domain.model import User
from devproof.domain.value import AuthContext


class RequireAuthenticatedUserUseCase(BaseUseCase):
    """Use case guarding operations that need a logged-in user."""

    def __init__(self, resolve_current_user: ResolveCurrentUserUseCase) -> None:
        """Initialize require authenticated user use case.

        Args:
            resolve_current_user: Current user resolution use case
        """
        self.resolve_current_user = resolve_current_user

    async def execute(self, request: AuthContext) -> User:
        """Resolve the caller and fail if there is none.

        Args:
            request: Authentication context of the current request

        Returns:
            The stored user

        Raises:
            UnauthorizedError: If the caller is not logged in
        """
        user = await self.resolve_current_user.execute(request)
        if not user:
            raise UnauthorizedError()
        return user
