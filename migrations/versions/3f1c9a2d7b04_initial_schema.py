"""initial_schema

Create the schema for Ask:
- Users
- Questions, answers and solutions (soft delete via deleted_at)
- Reactions (polymorphic like/dislike, one per user and item)
- Comments (polymorphic, threaded with cascading replies)

Revision ID: 3f1c9a2d7b04
Revises:
Create Date: 2026-10-17 09:12:44.318021

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3f1c9a2d7b04"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps() -> list[sa.Column]:
    return [
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
    ]


def _id() -> sa.Column:
    return sa.Column(
        "id",
        sa.UUID(),
        server_default=sa.text("uuid_generate_v4()"),
        nullable=False,
    )


def upgrade() -> None:
    """Upgrade schema."""
    op.execute('CREATE EXTENSION IF NOT EXISTS "uuid-ossp"')

    # Create ENUM types (idempotent)
    op.execute("""
        DO $$ BEGIN
            CREATE TYPE content_type AS ENUM ('question', 'answer', 'solution');
        EXCEPTION
            WHEN duplicate_object THEN null;
        END $$;
    """)

    op.execute("""
        DO $$ BEGIN
            CREATE TYPE duration_type AS ENUM ('minutes', 'hours', 'days');
        EXCEPTION
            WHEN duplicate_object THEN null;
        END $$;
    """)

    content_type = postgresql.ENUM(
        "question", "answer", "solution", name="content_type", create_type=False
    )

    # ========================================================================
    # USERS table
    # ========================================================================
    op.create_table(
        "users",
        _id(),
        sa.Column("handle", sa.String(255), nullable=False),
        sa.Column("name", sa.String(255), nullable=True),
        sa.Column("bio", sa.String(500), nullable=True),
        sa.Column("avatar_url", sa.Text(), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("handle", name="uq_users_handle"),
    )

    # ========================================================================
    # QUESTIONS table
    # ========================================================================
    op.create_table(
        "questions",
        _id(),
        sa.Column("author_id", sa.UUID(), nullable=False),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("description", sa.Text(), nullable=False, server_default=""),
        sa.Column(
            "tags",
            postgresql.ARRAY(sa.String(30)),
            nullable=False,
            server_default="{}",
        ),
        sa.Column("is_solved", sa.Boolean(), nullable=False, server_default="false"),
        *_timestamps(),
        sa.Column("deleted_at", sa.TIMESTAMP(timezone=True), nullable=True),
        sa.ForeignKeyConstraint(["author_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_questions_author_id", "questions", ["author_id"])
    op.create_index(
        "idx_questions_created_at", "questions", [sa.text("created_at DESC")]
    )
    # Full-text index backing the fallback search
    op.execute("""
        CREATE INDEX idx_questions_search ON questions USING GIN (
            to_tsvector('simple', coalesce(title, '') || ' ' || coalesce(description, ''))
        )
    """)

    # ========================================================================
    # ANSWERS table
    # ========================================================================
    op.create_table(
        "answers",
        _id(),
        sa.Column("question_id", sa.UUID(), nullable=False),
        sa.Column("author_id", sa.UUID(), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("is_accepted", sa.Boolean(), nullable=False, server_default="false"),
        *_timestamps(),
        sa.Column("deleted_at", sa.TIMESTAMP(timezone=True), nullable=True),
        sa.ForeignKeyConstraint(["question_id"], ["questions.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["author_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_answers_question_id", "answers", ["question_id"])
    op.create_index("idx_answers_author_id", "answers", ["author_id"])
    # At most one accepted answer per question
    op.create_index(
        "uq_answers_one_accepted",
        "answers",
        ["question_id"],
        unique=True,
        postgresql_where=sa.text("is_accepted"),
    )

    # ========================================================================
    # SOLUTIONS table
    # ========================================================================
    op.create_table(
        "solutions",
        _id(),
        sa.Column("author_id", sa.UUID(), nullable=False),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("description", sa.Text(), nullable=False, server_default=""),
        sa.Column(
            "tags",
            postgresql.ARRAY(sa.String(30)),
            nullable=False,
            server_default="{}",
        ),
        sa.Column("duration", sa.Integer(), nullable=False, server_default="0"),
        sa.Column(
            "duration_type",
            postgresql.ENUM(
                "minutes", "hours", "days", name="duration_type", create_type=False
            ),
            nullable=False,
            server_default="minutes",
        ),
        *_timestamps(),
        sa.Column("deleted_at", sa.TIMESTAMP(timezone=True), nullable=True),
        sa.ForeignKeyConstraint(["author_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint("duration >= 0", name="ck_solutions_duration_non_negative"),
    )
    op.create_index("idx_solutions_author_id", "solutions", ["author_id"])

    # ========================================================================
    # REACTIONS table (polymorphic)
    # ========================================================================
    op.create_table(
        "reactions",
        _id(),
        sa.Column("user_id", sa.UUID(), nullable=False),
        sa.Column("content_type", content_type, nullable=False),
        sa.Column("content_id", sa.UUID(), nullable=False),
        sa.Column("is_like", sa.Boolean(), nullable=False),
        sa.Column("parent_id", sa.UUID(), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint(
            "user_id", "content_type", "content_id", name="uq_reaction_user_content"
        ),
    )
    op.create_index(
        "idx_reactions_content", "reactions", ["content_type", "content_id"]
    )

    # ========================================================================
    # COMMENTS table (polymorphic, threaded)
    # ========================================================================
    op.create_table(
        "comments",
        _id(),
        sa.Column("author_id", sa.UUID(), nullable=False),
        sa.Column("content_type", content_type, nullable=False),
        sa.Column("content_id", sa.UUID(), nullable=False),
        sa.Column("body", sa.Text(), nullable=False),
        sa.Column("parent_id", sa.UUID(), nullable=True),
        *_timestamps(),
        sa.Column("deleted_at", sa.TIMESTAMP(timezone=True), nullable=True),
        sa.ForeignKeyConstraint(["author_id"], ["users.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["parent_id"], ["comments.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "idx_comments_content", "comments", ["content_type", "content_id"]
    )
    op.create_index("idx_comments_parent_id", "comments", ["parent_id"])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table("comments")
    op.drop_table("reactions")
    op.drop_table("solutions")
    op.drop_table("answers")
    op.drop_table("questions")
    op.drop_table("users")
    op.execute("DROP TYPE IF EXISTS duration_type")
    op.execute("DROP TYPE IF EXISTS content_type")
