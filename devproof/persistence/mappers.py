"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict
from uuid import UUID

from devproof.domain.model import Proof, Skill, Submission, User
from devproof.domain.value import (
    ExperienceLevel,
    ProofId,
    SkillCategory,
    SkillId,
    SubmissionId,
    SubmissionStatus,
    UserId,
)


def _as_uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_skill(row: Dict[str, Any]) -> Skill:
    """Convert database row to Skill domain model.

    Args:
        row: Database row as dict

    Returns:
        Skill domain model
    """
    return Skill(
        id=SkillId(_as_uuid(row["id"])),
        user_id=UserId(row["user_id"]),
        skill_name=row["skill_name"],
        category=SkillCategory(row["category"]),
        current_level=row["current_level"],
        confidence_score=row["confidence_score"],
        proofs_completed=row["proofs_completed"],
    )


def skill_to_dict(skill: Skill) -> Dict[str, Any]:
    """Convert Skill domain model to database dict."""
    return {
        "id": skill.id,
        "user_id": skill.user_id,
        "skill_name": skill.skill_name,
        "category": skill.category.value,
        "current_level": skill.current_level,
        "confidence_score": skill.confidence_score,
        "proofs_completed": skill.proofs_completed,
    }


def row_to_user(row: Dict[str, Any], skills: list[Skill] | None = None) -> User:
    """Convert database row to User domain model.

    Args:
        row: Database row as dict
        skills: The user's skills, loaded alongside the row

    Returns:
        User domain model
    """
    return User(
        id=UserId(row["id"]),
        email=row.get("email") or "",
        name=row["name"],
        avatar=row.get("avatar"),
        current_role=row.get("current_role"),
        experience=ExperienceLevel(row["experience"]),
        dream_companies=row.get("dream_companies") or "",
        career_goals=row.get("career_goals") or "",
        reputation=row["reputation"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
        skills=skills or [],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict.

    Skills are stored in their own table and are not included.

    Args:
        user: User domain model

    Returns:
        Dict suitable for database insertion/update
    """
    return {
        "id": user.id,
        "email": user.email,
        "name": user.name,
        "avatar": user.avatar,
        "current_role": user.current_role,
        "experience": user.experience.value,
        "dream_companies": user.dream_companies,
        "career_goals": user.career_goals,
        "reputation": user.reputation,
        "created_at": user.created_at,
        "updated_at": user.updated_at,
    }


def row_to_submission(row: Dict[str, Any]) -> Submission:
    """Convert a submissions row joined with its proof to a Submission.

    Expects the proof columns labelled ``proof_title``, ``proof_category``
    and ``proof_difficulty``.

    Args:
        row: Joined database row as dict

    Returns:
        Submission domain model with its proof
    """
    return Submission(
        id=SubmissionId(_as_uuid(row["id"])),
        user_id=UserId(row["user_id"]),
        proof=Proof(
            id=ProofId(_as_uuid(row["proof_id"])),
            title=row["proof_title"],
            category=SkillCategory(row["proof_category"]),
            difficulty=row["proof_difficulty"],
        ),
        status=SubmissionStatus(row["status"]),
        final_score=row.get("final_score"),
        submitted_at=row["submitted_at"],
    )
