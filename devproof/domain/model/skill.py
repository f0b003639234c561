"""Skill entity.

Skills are owned by a user and track progress in one area. Levels and
scores are maintained by the grading side of the platform.
"""

from pydantic import Field

from devproof.domain.model.common import DomainModel
from devproof.domain.value import SkillCategory, SkillId, UserId


class Skill(DomainModel):
    """A user's progress in a single skill."""

    id: SkillId
    user_id: UserId
    skill_name: str = Field(min_length=1, max_length=100)
    category: SkillCategory
    current_level: int = Field(default=0, ge=0, le=10)
    confidence_score: int = Field(default=0, ge=0, le=100)
    proofs_completed: int = Field(default=0, ge=0)
