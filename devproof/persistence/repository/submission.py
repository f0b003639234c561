"""PostgreSQL implementation of Submission repository."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from devproof.domain.model import Submission
from devproof.domain.repository import SubmissionRepository
from devproof.domain.value import UserId
from devproof.persistence.mappers import row_to_submission
from devproof.persistence.tables import proofs_table, submissions_table


class PostgresSubmissionRepository(SubmissionRepository):
    """PostgreSQL implementation of SubmissionRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_recent_by_user(
        self, user_id: UserId, limit: int = 10
    ) -> list[Submission]:
        """Get a user's most recent submissions with their proofs.

        Args:
            user_id: Owner of the submissions
            limit: Maximum number of submissions to return

        Returns:
            Submissions, newest first
        """
        stmt = (
            select(
                submissions_table,
                proofs_table.c.title.label("proof_title"),
                proofs_table.c.category.label("proof_category"),
                proofs_table.c.difficulty.label("proof_difficulty"),
            )
            .select_from(
                submissions_table.join(
                    proofs_table, submissions_table.c.proof_id == proofs_table.c.id
                )
            )
            .where(submissions_table.c.user_id == user_id)
            .order_by(submissions_table.c.submitted_at.desc())
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return [row_to_submission(dict(row)) for row in result.mappings().all()]
