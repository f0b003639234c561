"""Session token domain service."""

import logfire

from devproof.config import AuthSettings
from devproof.domain.value import AuthContext, UserId
from devproof.util.session import (
    SessionTokenError,
    SessionTokenPayload,
    verify_session_token,
)

from .base import Service


class SessionService(Service):
    """Domain service for identity provider session tokens."""

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize session service.

        Args:
            auth_settings: Authentication settings
        """
        self.auth_settings = auth_settings

    def verify_token(self, token: str) -> SessionTokenPayload:
        """Verify a session token and extract its payload.

        Args:
            token: Session token (JWT) issued by the identity provider

        Returns:
            Token payload

        Raises:
            SessionTokenError: If token is invalid or expired
        """
        with logfire.span("session_service.verify_token"):
            try:
                payload = verify_session_token(token, self.auth_settings)
                logfire.info("Session token verified", identity_id=payload.sub)
                return payload
            except SessionTokenError as e:
                logfire.warn("Session token verification failed", error=str(e))
                raise

    def build_auth_context(self, token: str | None) -> AuthContext:
        """Build the authentication context for a request.

        Missing, malformed, expired or foreign tokens all yield an anonymous
        context. Being logged out is not an error.

        Args:
            token: Session token from the request (optional)

        Returns:
            Context carrying the identity ID, or an anonymous context
        """
        if not token:
            return AuthContext.anonymous()

        try:
            payload = self.verify_token(token)
        except SessionTokenError as e:
            logfire.debug(
                "Session verification failed, treating as unauthenticated",
                error=str(e),
            )
            return AuthContext.anonymous()

        return AuthContext(identity_id=UserId(payload.sub))
