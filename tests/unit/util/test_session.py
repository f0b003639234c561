"""Unit tests for session token utilities."""

from datetime import timedelta

import jwt
import pytest

from devproof.config import AuthSettings
from devproof.util.session import (
    SessionTokenError,
    create_session_token,
    verify_session_token,
)

SETTINGS = AuthSettings(session_key="unit-test-session-key-32-bytes-min")


def test_round_trip_claims():
    token = create_session_token(
        "user_2abc", SETTINGS, session_id="sess_9", authorized_party="https://a.io"
    )

    claims = verify_session_token(token, SETTINGS)

    assert claims.sub == "user_2abc"
    assert claims.sid == "sess_9"
    assert claims.azp == "https://a.io"


def test_expiry_within_leeway_is_accepted():
    """Tokens expired by less than the leeway still verify."""
    token = create_session_token(
        "user_2abc", SETTINGS, expires_in=timedelta(seconds=-2)
    )

    assert verify_session_token(token, SETTINGS).sub == "user_2abc"


def test_missing_subject_is_rejected():
    token = jwt.encode(
        {"exp": 9999999999}, SETTINGS.session_key, algorithm="HS256"
    )

    with pytest.raises(SessionTokenError):
        verify_session_token(token, SETTINGS)


def test_algorithm_is_pinned():
    """Tokens signed with an unexpected algorithm are rejected."""
    token = jwt.encode(
        {"sub": "user_2abc", "exp": 9999999999},
        SETTINGS.session_key,
        algorithm="HS512",
    )

    with pytest.raises(SessionTokenError, match="Invalid"):
        verify_session_token(token, SETTINGS)
