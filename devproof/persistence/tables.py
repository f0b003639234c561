"""SQLAlchemy table definitions for DevProof.

These table definitions are used with SQLAlchemy Core queries.
They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    CheckConstraint,
    Column,
    Enum,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    UniqueConstraint,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

experience_level_enum = Enum(
    "BEGINNER",
    "JUNIOR",
    "MID",
    "SENIOR",
    "STAFF",
    "PRINCIPAL",
    name="experience_level",
    create_type=False,
)

skill_category_enum = Enum(
    "FRONTEND",
    "BACKEND",
    "FULLSTACK",
    "DEVOPS",
    "DESIGN",
    "DATA",
    name="skill_category",
    create_type=False,
)

submission_status_enum = Enum(
    "SUBMITTED",
    "UNDER_REVIEW",
    "COMPLETED",
    name="submission_status",
    create_type=False,
)

# ============================================================================
# USERS TABLE (keyed by identity provider user ID)
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", String(255), primary_key=True),  # Identity provider user ID
    Column("email", String(255), nullable=False, server_default=""),
    Column("name", String(255), nullable=False),
    Column("avatar", Text, nullable=True),
    Column("current_role", String(255), nullable=True),
    Column(
        "experience", experience_level_enum, nullable=False, server_default="BEGINNER"
    ),
    Column("dream_companies", Text, nullable=False, server_default=""),
    Column("career_goals", Text, nullable=False, server_default=""),
    Column("reputation", Integer, nullable=False, server_default="0"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("reputation >= 0", name="reputation_non_negative"),
)

Index("idx_users_email", users_table.c.email)

# ============================================================================
# SKILLS TABLE
# ============================================================================
skills_table = Table(
    "skills",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column(
        "user_id",
        String(255),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("skill_name", String(100), nullable=False),
    Column("category", skill_category_enum, nullable=False),
    Column("current_level", Integer, nullable=False, server_default="0"),
    Column("confidence_score", Integer, nullable=False, server_default="0"),
    Column("proofs_completed", Integer, nullable=False, server_default="0"),
    UniqueConstraint("user_id", "skill_name", name="uq_user_skill"),
    CheckConstraint("current_level BETWEEN 0 AND 10", name="current_level_range"),
    CheckConstraint("confidence_score BETWEEN 0 AND 100", name="confidence_range"),
    CheckConstraint("proofs_completed >= 0", name="proofs_completed_non_negative"),
)

Index("idx_skills_user_id", skills_table.c.user_id)

# ============================================================================
# PROOFS TABLE
# ============================================================================
proofs_table = Table(
    "proofs",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("title", String(300), nullable=False),
    Column("category", skill_category_enum, nullable=False),
    Column("difficulty", String(50), nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

# ============================================================================
# SUBMISSIONS TABLE
# ============================================================================
submissions_table = Table(
    "submissions",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column(
        "user_id",
        String(255),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "proof_id", UUID, ForeignKey("proofs.id", ondelete="RESTRICT"), nullable=False
    ),
    Column(
        "status", submission_status_enum, nullable=False, server_default="SUBMITTED"
    ),
    Column("final_score", Integer, nullable=True),
    Column(
        "submitted_at",
        TIMESTAMP(timezone=True),
        nullable=False,
        server_default="NOW()",
    ),
    CheckConstraint(
        "final_score IS NULL OR final_score BETWEEN 0 AND 100",
        name="final_score_range",
    ),
)

# Profile page reads a user's newest submissions
Index(
    "idx_submissions_user_submitted_at",
    submissions_table.c.user_id,
    submissions_table.c.submitted_at.desc(),
)
Index("idx_submissions_proof_id", submissions_table.c.proof_id)
