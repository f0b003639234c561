"""Session token utilities.

Session tokens are JWTs minted by the identity provider. The provider user
ID travels in the ``sub`` claim.
"""

from datetime import datetime, timedelta, timezone

import jwt
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from devproof.config import AuthSettings
from devproof.util.error import UtilError


class SessionTokenPayload(BaseModel):
    """Session token claims used by the API."""

    sub: str
    exp: datetime
    iss: str | None = None
    azp: str | None = None
    sid: str | None = None


class SessionTokenError(UtilError):
    """Session token related error."""

    pass


def create_session_token(
    identity_id: str,
    settings: AuthSettings,
    expires_in: timedelta = timedelta(minutes=60),
    session_id: str | None = None,
    authorized_party: str | None = None,
) -> str:
    """Create a session token.

    Only usable with symmetric algorithms; in production tokens are minted
    by the identity provider. Used for local development and tests.

    Args:
        identity_id: Provider user ID (becomes the ``sub`` claim)
        settings: Authentication settings
        expires_in: Token lifetime (negative values produce an expired token)
        session_id: Optional provider session ID
        authorized_party: Optional ``azp`` claim

    Returns:
        Encoded session token
    """
    payload: dict = {
        "sub": identity_id,
        "exp": datetime.now(timezone.utc) + expires_in,
    }
    if settings.session_issuer:
        payload["iss"] = settings.session_issuer
    if session_id:
        payload["sid"] = session_id
    if authorized_party:
        payload["azp"] = authorized_party

    return jwt.encode(
        payload, settings.session_key, algorithm=settings.session_algorithm
    )


def verify_session_token(token: str, settings: AuthSettings) -> SessionTokenPayload:
    """Verify and decode a session token.

    Args:
        token: Session token to verify
        settings: Authentication settings

    Returns:
        Token payload if valid

    Raises:
        SessionTokenError: If token is invalid, expired, or issued for another party
    """
    try:
        payload = jwt.decode(
            token,
            settings.session_key,
            algorithms=[settings.session_algorithm],
            issuer=settings.session_issuer,
            leeway=settings.leeway,
            options={"require": ["sub", "exp"]},
        )
    except jwt.ExpiredSignatureError:
        raise SessionTokenError("Session token has expired")
    except jwt.InvalidTokenError:
        raise SessionTokenError("Invalid session token")

    try:
        claims = SessionTokenPayload(**payload)
    except PydanticValidationError:
        raise SessionTokenError("Malformed session token claims")

    if settings.authorized_parties and claims.azp not in settings.authorized_parties:
        raise SessionTokenError(f"Unauthorized party: {claims.azp}")

    return claims
