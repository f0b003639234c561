"""PostgreSQL repository implementations."""

from devproof.persistence.repository.submission import PostgresSubmissionRepository
from devproof.persistence.repository.user import PostgresUserRepository

__all__ = [
    "PostgresUserRepository",
    "PostgresSubmissionRepository",
]
