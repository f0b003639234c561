"""Domain value objects for DevProof."""

from devproof.domain.value.identifiers import (
    ProofId,
    SkillId,
    SubmissionId,
    UserId,
)
from devproof.domain.value.types import (
    DEFAULT_DISPLAY_NAME,
    AuthContext,
    EmailAddress,
    ExperienceLevel,
    IdentityProfile,
    SkillCategory,
    SubmissionStatus,
)

__all__ = [
    # Identifiers
    "UserId",
    "SkillId",
    "ProofId",
    "SubmissionId",
    # Types
    "DEFAULT_DISPLAY_NAME",
    "AuthContext",
    "EmailAddress",
    "ExperienceLevel",
    "IdentityProfile",
    "SkillCategory",
    "SubmissionStatus",
]
