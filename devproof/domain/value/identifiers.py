"""Strongly typed identifiers for DevProof domain entities.

Using NewType for strong typing prevents mixing up different entity IDs
and makes the code more self-documenting.
"""

from typing import NewType
from uuid import UUID

# Users are keyed by the identity provider's opaque user ID (e.g. "user_2abc...")
UserId = NewType("UserId", str)

SkillId = NewType("SkillId", UUID)
ProofId = NewType("ProofId", UUID)
SubmissionId = NewType("SubmissionId", UUID)
