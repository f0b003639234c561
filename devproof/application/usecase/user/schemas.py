"""User response models shared by user and auth use cases."""

from datetime import datetime

from devproof.application.usecase.base import CamelModel
from devproof.domain.model import Skill, Submission, User
from devproof.domain.value import ExperienceLevel, SkillCategory, SubmissionStatus


class SkillInfo(CamelModel):
    """Skill progress for response."""

    id: str
    skill_name: str
    category: SkillCategory
    current_level: int
    confidence_score: int
    proofs_completed: int

    @classmethod
    def from_domain(cls, skill: Skill) -> "SkillInfo":
        return cls(
            id=str(skill.id),
            skill_name=skill.skill_name,
            category=skill.category,
            current_level=skill.current_level,
            confidence_score=skill.confidence_score,
            proofs_completed=skill.proofs_completed,
        )


class ProofInfo(CamelModel):
    """Proof summary embedded in a submission."""

    title: str
    category: SkillCategory
    difficulty: str


class SubmissionInfo(CamelModel):
    """Submission for response."""

    id: str
    status: SubmissionStatus
    final_score: int | None
    submitted_at: datetime
    proof: ProofInfo

    @classmethod
    def from_domain(cls, submission: Submission) -> "SubmissionInfo":
        return cls(
            id=str(submission.id),
            status=submission.status,
            final_score=submission.final_score,
            submitted_at=submission.submitted_at,
            proof=ProofInfo(
                title=submission.proof.title,
                category=submission.proof.category,
                difficulty=submission.proof.difficulty,
            ),
        )


class UserInfo(CamelModel):
    """User with skills for response."""

    id: str
    name: str
    email: str
    avatar: str | None
    current_role: str | None
    experience: ExperienceLevel
    dream_companies: str
    career_goals: str
    reputation: int
    skills: list[SkillInfo]

    @classmethod
    def from_domain(cls, user: User) -> "UserInfo":
        """Convert domain User to response model.

        Args:
            user: Domain user with skills loaded

        Returns:
            API response model
        """
        return cls(
            id=user.id,
            name=user.name,
            email=user.email,
            avatar=user.avatar,
            current_role=user.current_role,
            experience=user.experience,
            dream_companies=user.dream_companies,
            career_goals=user.career_goals,
            reputation=user.reputation,
            skills=[SkillInfo.from_domain(skill) for skill in user.skills],
        )


class UserProfileInfo(UserInfo):
    """User with skills and recent submissions, as rendered by the dashboard."""

    submissions: list[SubmissionInfo]
