"""In-memory repository implementations for testing."""

from .submission import InMemorySubmissionRepository
from .user import InMemoryUserRepository

__all__ = [
    "InMemorySubmissionRepository",
    "InMemoryUserRepository",
]
