"""Domain services."""

from .base import Service
from .identity_service import IdentityProviderClient, IdentityService
from .session_service import SessionService
from .submission_service import SubmissionService
from .user_service import UserService

__all__ = [
    "IdentityProviderClient",
    "IdentityService",
    "Service",
    "SessionService",
    "SubmissionService",
    "UserService",
]
