"""Submission entity and the proof it answers."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from devproof.domain.model.common import DomainModel, utc_now
from devproof.domain.value import (
    ProofId,
    SkillCategory,
    SubmissionId,
    SubmissionStatus,
    UserId,
)


class Proof(DomainModel):
    """A challenge users complete to demonstrate a skill."""

    id: ProofId
    title: str = Field(min_length=1, max_length=300)
    category: SkillCategory
    difficulty: str = Field(min_length=1, max_length=50)


class Submission(DomainModel):
    """A user's attempt at a proof.

    The referenced proof is loaded together with the submission.
    """

    id: SubmissionId
    user_id: UserId
    proof: Proof
    status: SubmissionStatus = SubmissionStatus.SUBMITTED
    final_score: Optional[int] = Field(default=None, ge=0, le=100)
    submitted_at: datetime = Field(default_factory=utc_now)
