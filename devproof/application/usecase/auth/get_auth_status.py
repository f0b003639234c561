"""Get authentication status use case."""

from devproof.application.usecase.auth.resolve_current_user import (
    ResolveCurrentUserUseCase,
)
from devproof.application.usecase.base import BaseUseCase, CamelModel
from devproof.application.usecase.user.schemas import UserInfo
from devproof.domain.value import AuthContext


class AuthStatusResponse(CamelModel):
    """Authentication status.

    Returns the current user if authenticated, or indicates the
    unauthenticated state without raising an error.
    """

    authenticated: bool
    user: UserInfo | None = None


class GetAuthStatusUseCase(BaseUseCase):
    """Use case for reporting who is logged in."""

    def __init__(self, resolve_current_user: ResolveCurrentUserUseCase) -> None:
        """Initialize get auth status use case.

        Args:
            resolve_current_user: Current user resolution use case
        """
        self.resolve_current_user = resolve_current_user

    async def execute(self, request: AuthContext) -> AuthStatusResponse:
        """Execute auth status lookup.

        Args:
            request: Authentication context of the current request

        Returns:
            Status with the resolved user, if any
        """
        user = await self.resolve_current_user.execute(request)
        if not user:
            return AuthStatusResponse(authenticated=False)

        return AuthStatusResponse(authenticated=True, user=UserInfo.from_domain(user))
