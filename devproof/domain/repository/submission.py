"""Submission repository interface."""

from abc import ABC, abstractmethod

from devproof.domain.model.submission import Submission
from devproof.domain.value import UserId


class SubmissionRepository(ABC):
    """Repository for Submission entities.

    Submissions are read together with the proof they answer.
    """

    @abstractmethod
    async def find_recent_by_user(
        self, user_id: UserId, limit: int = 10
    ) -> list[Submission]:
        """Get a user's most recent submissions.

        Args:
            user_id: Owner of the submissions
            limit: Maximum number of submissions to return

        Returns:
            Submissions ordered by submitted_at, newest first (may be empty)
        """
        pass
