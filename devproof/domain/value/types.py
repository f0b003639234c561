"""Domain value objects for DevProof.

Value objects are immutable and defined by their values, not identity.
"""

from enum import Enum

from pydantic import Field

from devproof.domain.value.common import ValueObject
from devproof.domain.value.identifiers import UserId

DEFAULT_DISPLAY_NAME = "User"


class ExperienceLevel(str, Enum):
    """Self-reported seniority of a developer."""

    BEGINNER = "BEGINNER"
    JUNIOR = "JUNIOR"
    MID = "MID"
    SENIOR = "SENIOR"
    STAFF = "STAFF"
    PRINCIPAL = "PRINCIPAL"


class SkillCategory(str, Enum):
    """Area a skill or proof belongs to."""

    FRONTEND = "FRONTEND"
    BACKEND = "BACKEND"
    FULLSTACK = "FULLSTACK"
    DEVOPS = "DEVOPS"
    DESIGN = "DESIGN"
    DATA = "DATA"


class SubmissionStatus(str, Enum):
    """Review state of a proof submission."""

    SUBMITTED = "SUBMITTED"
    UNDER_REVIEW = "UNDER_REVIEW"
    COMPLETED = "COMPLETED"


class AuthContext(ValueObject):
    """Authentication state of the current request.

    Built by the interface layer from the session token and passed
    explicitly to use cases. An empty context means "not logged in".
    """

    identity_id: UserId | None = None

    @property
    def is_authenticated(self) -> bool:
        """Whether the request carries a verified identity."""
        return self.identity_id is not None

    @classmethod
    def anonymous(cls) -> "AuthContext":
        """Context for a request without a (valid) session."""
        return cls()


class EmailAddress(ValueObject):
    """Email address entry on the identity provider's user record."""

    email_address: str


class IdentityProfile(ValueObject):
    """User record as returned by the identity provider.

    Field names follow the provider's backend API.
    """

    id: str
    email_addresses: list[EmailAddress] = Field(default_factory=list)
    first_name: str | None = None
    last_name: str | None = None
    image_url: str | None = None

    @property
    def primary_email(self) -> str:
        """First listed email address, or an empty string."""
        if not self.email_addresses:
            return ""
        return self.email_addresses[0].email_address

    @property
    def display_name(self) -> str:
        """Full name, falling back to a generic name when both parts are blank."""
        full_name = f"{self.first_name or ''} {self.last_name or ''}".strip()
        return full_name or DEFAULT_DISPLAY_NAME
