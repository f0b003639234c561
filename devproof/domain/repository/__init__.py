"""Repository interfaces for DevProof domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from devproof.domain.repository.submission import SubmissionRepository
from devproof.domain.repository.user import UserRepository

__all__ = [
    "UserRepository",
    "SubmissionRepository",
]
