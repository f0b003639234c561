"""User aggregate root.

Users are identified by the identity provider's user ID and are created
lazily the first time an authenticated request arrives for them.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from devproof.domain.model.common import DomainModel, utc_now
from devproof.domain.model.skill import Skill
from devproof.domain.value import ExperienceLevel, UserId


class User(DomainModel):
    """User aggregate root.

    The skills collection is always loaded with the user.
    """

    id: UserId
    email: str = ""
    name: str
    avatar: Optional[str] = None
    current_role: Optional[str] = None
    experience: ExperienceLevel = ExperienceLevel.BEGINNER
    dream_companies: str = ""
    career_goals: str = ""
    reputation: int = Field(default=0, ge=0)
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)
    skills: list[Skill] = Field(default_factory=list)
