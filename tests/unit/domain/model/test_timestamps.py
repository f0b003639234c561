"""Unit tests for domain model timestamp defaults."""

from uuid import uuid4

from devproof.domain.model import Proof, Submission, User
from devproof.domain.value import ProofId, SkillCategory, SubmissionId, UserId


def test_user_timestamps_default_to_aware_utc():
    user = User(id=UserId("u1"), name="Ann")

    assert user.created_at.utcoffset() is not None
    assert user.updated_at.utcoffset().total_seconds() == 0


def test_submission_timestamp_defaults_to_aware_utc():
    submission = Submission(
        id=SubmissionId(uuid4()),
        user_id=UserId("u1"),
        proof=Proof(
            id=ProofId(uuid4()),
            title="Build a CLI",
            category=SkillCategory.BACKEND,
            difficulty="easy",
        ),
    )

    assert submission.submitted_at.utcoffset().total_seconds() == 0
