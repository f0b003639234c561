"""Domain model entities for DevProof."""

from devproof.domain.model.skill import Skill
from devproof.domain.model.submission import Proof, Submission
from devproof.domain.model.user import User

__all__ = [
    "User",
    "Skill",
    "Proof",
    "Submission",
]
