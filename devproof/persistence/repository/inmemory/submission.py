"""In-memory submission repository for testing."""

from devproof.domain.model.submission import Submission
from devproof.domain.repository.submission import SubmissionRepository
from devproof.domain.value import SubmissionId, UserId


class InMemorySubmissionRepository(SubmissionRepository):
    """In-memory implementation of SubmissionRepository for testing."""

    def __init__(self) -> None:
        self._submissions: dict[SubmissionId, Submission] = {}

    async def find_recent_by_user(
        self, user_id: UserId, limit: int = 10
    ) -> list[Submission]:
        """Get a user's most recent submissions, newest first."""
        submissions = [s for s in self._submissions.values() if s.user_id == user_id]
        submissions.sort(key=lambda s: s.submitted_at, reverse=True)
        return submissions[:limit]

    def add(self, submission: Submission) -> None:
        """Store a submission, as the grading side would."""
        self._submissions[submission.id] = submission
