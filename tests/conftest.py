"""Test configuration and helpers."""

from datetime import datetime, timezone
from uuid import uuid4

from devproof.domain.model import Proof, Skill, Submission, User
from devproof.domain.value import (
    EmailAddress,
    IdentityProfile,
    ProofId,
    SkillCategory,
    SkillId,
    SubmissionId,
    SubmissionStatus,
    UserId,
)


def make_profile(
    identity_id: str,
    emails: list[str] | None = None,
    first_name: str | None = None,
    last_name: str | None = None,
    image_url: str | None = None,
) -> IdentityProfile:
    """Build an identity provider user record."""
    return IdentityProfile(
        id=identity_id,
        email_addresses=[EmailAddress(email_address=e) for e in emails or []],
        first_name=first_name,
        last_name=last_name,
        image_url=image_url,
    )


def make_user(identity_id: str, **fields) -> User:
    """Build a stored user with sensible defaults."""
    now = datetime.now(timezone.utc)
    defaults = {
        "id": UserId(identity_id),
        "email": f"{identity_id}@example.com",
        "name": "Existing User",
        "created_at": now,
        "updated_at": now,
    }
    return User(**{**defaults, **fields})


def make_skill(user_id: str, skill_name: str = "Python", **fields) -> Skill:
    """Build a skill owned by ``user_id``."""
    defaults = {
        "id": SkillId(uuid4()),
        "user_id": UserId(user_id),
        "skill_name": skill_name,
        "category": SkillCategory.BACKEND,
    }
    return Skill(**{**defaults, **fields})


def make_submission(
    user_id: str, submitted_at: datetime, title: str = "Build a REST API", **fields
) -> Submission:
    """Build a submission with its proof."""
    defaults = {
        "id": SubmissionId(uuid4()),
        "user_id": UserId(user_id),
        "proof": Proof(
            id=ProofId(uuid4()),
            title=title,
            category=SkillCategory.BACKEND,
            difficulty="medium",
        ),
        "status": SubmissionStatus.COMPLETED,
        "final_score": 80,
        "submitted_at": submitted_at,
    }
    return Submission(**{**defaults, **fields})
