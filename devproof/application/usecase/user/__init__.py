"""User use cases."""

from .get_user_profile import GetUserProfileUseCase
from .update_user_profile import UpdateUserProfileUseCase

__all__ = ["GetUserProfileUseCase", "UpdateUserProfileUseCase"]
