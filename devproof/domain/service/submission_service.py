"""Submission domain service."""

import logfire

from devproof.domain.model import Submission
from devproof.domain.repository import SubmissionRepository
from devproof.domain.value import UserId

from .base import Service


class SubmissionService(Service):
    """Domain service for submission reads."""

    def __init__(self, submission_repository: SubmissionRepository) -> None:
        """Initialize submission service.

        Args:
            submission_repository: Submission repository
        """
        self.submission_repository = submission_repository

    async def list_recent(self, user_id: UserId, limit: int = 10) -> list[Submission]:
        """List a user's most recent submissions, newest first.

        Args:
            user_id: Owner of the submissions
            limit: Maximum number of submissions

        Returns:
            Submissions with their proofs (may be empty)
        """
        with logfire.span(
            "submission_service.list_recent", user_id=user_id, limit=limit
        ):
            submissions = await self.submission_repository.find_recent_by_user(
                user_id, limit
            )
            logfire.info(
                "Submissions retrieved", user_id=user_id, count=len(submissions)
            )
            return submissions
