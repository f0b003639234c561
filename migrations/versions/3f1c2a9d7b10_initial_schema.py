"""initial_schema

Create the foundational schema for DevProof:
- Users (keyed by identity provider user ID)
- Skills (per-user skill progress)
- Proofs (challenges users complete)
- Submissions (a user's attempts at proofs)

Revision ID: 3f1c2a9d7b10
Revises:
Create Date: 2026-10-12 09:14:02.511803

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3f1c2a9d7b10"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


EXPERIENCE_LEVELS = ("BEGINNER", "JUNIOR", "MID", "SENIOR", "STAFF", "PRINCIPAL")
SKILL_CATEGORIES = ("FRONTEND", "BACKEND", "FULLSTACK", "DEVOPS", "DESIGN", "DATA")
SUBMISSION_STATUSES = ("SUBMITTED", "UNDER_REVIEW", "COMPLETED")


def _create_enum(name: str, values: Sequence[str]) -> None:
    labels = ", ".join(f"'{value}'" for value in values)
    op.execute(f"""
        DO $$ BEGIN
            CREATE TYPE {name} AS ENUM ({labels});
        EXCEPTION
            WHEN duplicate_object THEN null;
        END $$;
    """)


def upgrade() -> None:
    """Upgrade schema."""
    op.execute('CREATE EXTENSION IF NOT EXISTS "uuid-ossp"')

    # Create ENUM types (idempotent)
    _create_enum("experience_level", EXPERIENCE_LEVELS)
    _create_enum("skill_category", SKILL_CATEGORIES)
    _create_enum("submission_status", SUBMISSION_STATUSES)

    # ========================================================================
    # USERS table
    # ========================================================================
    op.create_table(
        "users",
        sa.Column("id", sa.String(255), nullable=False),  # Identity provider ID
        sa.Column("email", sa.String(255), nullable=False, server_default=""),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("avatar", sa.Text(), nullable=True),
        sa.Column("current_role", sa.String(255), nullable=True),
        sa.Column(
            "experience",
            postgresql.ENUM(
                *EXPERIENCE_LEVELS, name="experience_level", create_type=False
            ),
            nullable=False,
            server_default="BEGINNER",
        ),
        sa.Column("dream_companies", sa.Text(), nullable=False, server_default=""),
        sa.Column("career_goals", sa.Text(), nullable=False, server_default=""),
        sa.Column("reputation", sa.Integer(), nullable=False, server_default="0"),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column(
            "updated_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint("reputation >= 0", name="reputation_non_negative"),
    )
    op.create_index("idx_users_email", "users", ["email"])

    # ========================================================================
    # SKILLS table
    # ========================================================================
    op.create_table(
        "skills",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("uuid_generate_v4()"),
            nullable=False,
        ),
        sa.Column("user_id", sa.String(255), nullable=False),
        sa.Column("skill_name", sa.String(100), nullable=False),
        sa.Column(
            "category",
            postgresql.ENUM(*SKILL_CATEGORIES, name="skill_category", create_type=False),
            nullable=False,
        ),
        sa.Column("current_level", sa.Integer(), nullable=False, server_default="0"),
        sa.Column(
            "confidence_score", sa.Integer(), nullable=False, server_default="0"
        ),
        sa.Column(
            "proofs_completed", sa.Integer(), nullable=False, server_default="0"
        ),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("user_id", "skill_name", name="uq_user_skill"),
        sa.CheckConstraint(
            "current_level BETWEEN 0 AND 10", name="current_level_range"
        ),
        sa.CheckConstraint(
            "confidence_score BETWEEN 0 AND 100", name="confidence_range"
        ),
        sa.CheckConstraint(
            "proofs_completed >= 0", name="proofs_completed_non_negative"
        ),
    )
    op.create_index("idx_skills_user_id", "skills", ["user_id"])

    # ========================================================================
    # PROOFS table
    # ========================================================================
    op.create_table(
        "proofs",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("uuid_generate_v4()"),
            nullable=False,
        ),
        sa.Column("title", sa.String(300), nullable=False),
        sa.Column(
            "category",
            postgresql.ENUM(*SKILL_CATEGORIES, name="skill_category", create_type=False),
            nullable=False,
        ),
        sa.Column("difficulty", sa.String(50), nullable=False),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.PrimaryKeyConstraint("id"),
    )

    # ========================================================================
    # SUBMISSIONS table
    # ========================================================================
    op.create_table(
        "submissions",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("uuid_generate_v4()"),
            nullable=False,
        ),
        sa.Column("user_id", sa.String(255), nullable=False),
        sa.Column("proof_id", sa.UUID(), nullable=False),
        sa.Column(
            "status",
            postgresql.ENUM(
                *SUBMISSION_STATUSES, name="submission_status", create_type=False
            ),
            nullable=False,
            server_default="SUBMITTED",
        ),
        sa.Column("final_score", sa.Integer(), nullable=True),
        sa.Column(
            "submitted_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["proof_id"], ["proofs.id"], ondelete="RESTRICT"),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint(
            "final_score IS NULL OR final_score BETWEEN 0 AND 100",
            name="final_score_range",
        ),
    )
    op.create_index(
        "idx_submissions_user_submitted_at",
        "submissions",
        ["user_id", sa.text("submitted_at DESC")],
    )
    op.create_index("idx_submissions_proof_id", "submissions", ["proof_id"])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index("idx_submissions_proof_id", table_name="submissions")
    op.drop_index("idx_submissions_user_submitted_at", table_name="submissions")
    op.drop_table("submissions")
    op.drop_table("proofs")
    op.drop_index("idx_skills_user_id", table_name="skills")
    op.drop_table("skills")
    op.drop_index("idx_users_email", table_name="users")
    op.drop_table("users")

    op.execute("DROP TYPE IF EXISTS submission_status")
    op.execute("DROP TYPE IF EXISTS skill_category")
    op.execute("DROP TYPE IF EXISTS experience_level")
