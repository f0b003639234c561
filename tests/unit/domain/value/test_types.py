"""Unit tests for identity value objects."""

from devproof.domain.value import AuthContext, IdentityProfile
from tests.conftest import make_profile


class TestIdentityProfile:
    """Tests for IdentityProfile derived fields."""

    def test_primary_email_is_first_listed(self):
        profile = make_profile("u2", emails=["a@b.com", "c@d.com"])

        assert profile.primary_email == "a@b.com"

    def test_primary_email_empty_without_addresses(self):
        assert make_profile("u1").primary_email == ""

    def test_display_name_joins_and_trims(self):
        assert make_profile("u2", first_name="Ann", last_name="Lee").display_name == (
            "Ann Lee"
        )
        assert make_profile("u3", last_name="Lee").display_name == "Lee"

    def test_display_name_falls_back_to_user(self):
        assert make_profile("u1", first_name="", last_name="").display_name == "User"
        assert make_profile("u1", first_name=" ").display_name == "User"

    def test_parses_provider_payload_ignoring_unknown_fields(self):
        """Provider responses carry many more fields than we read."""
        profile = IdentityProfile.model_validate(
            {
                "id": "user_2abc",
                "object": "user",
                "email_addresses": [
                    {"id": "idn_1", "email_address": "a@b.com", "verification": None}
                ],
                "first_name": "Ann",
                "last_name": None,
                "image_url": "https://img.clerk.com/abc",
                "created_at": 1700000000000,
            }
        )

        assert profile.primary_email == "a@b.com"
        assert profile.display_name == "Ann"
        assert profile.image_url == "https://img.clerk.com/abc"


class TestAuthContext:
    def test_anonymous_context(self):
        context = AuthContext.anonymous()

        assert context.identity_id is None
        assert not context.is_authenticated
