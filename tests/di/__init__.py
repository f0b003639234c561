"""Mock providers for testing."""

from .clerk import MockClerkProvider
from .persistence import MockPersistenceProvider
from .container import build_test_container

__all__ = [
    "MockClerkProvider",
    "MockPersistenceProvider",
    "build_test_container",
]
