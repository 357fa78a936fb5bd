"""SQLAlchemy table definitions for Ask.

These table definitions are used with SQLAlchemy Core queries.
They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    UniqueConstraint,
    text,
)
from sqlalchemy.dialects import postgresql
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

CONTENT_TYPE_ENUM = postgresql.ENUM(
    "question", "answer", "solution", name="content_type", create_type=False
)

# ============================================================================
# USERS TABLE
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("handle", String(255), nullable=False, unique=True),
    Column("name", String(255), nullable=True),
    Column("bio", String(500), nullable=True),
    Column("avatar_url", Text, nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

# ============================================================================
# QUESTIONS TABLE
# ============================================================================
questions_table = Table(
    "questions",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column(
        "author_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column("title", String(255), nullable=False),
    Column("description", Text, nullable=False, server_default=""),
    Column("tags", postgresql.ARRAY(String(30)), nullable=False, server_default="{}"),
    Column("is_solved", Boolean, nullable=False, server_default="false"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column("deleted_at", TIMESTAMP(timezone=True), nullable=True),
)

Index("idx_questions_author_id", questions_table.c.author_id)
Index("idx_questions_created_at", questions_table.c.created_at.desc())
Index(
    "idx_questions_search",
    text(
        "to_tsvector('simple', coalesce(title, '') || ' ' || coalesce(description, ''))"
    ),
    postgresql_using="gin",
)

# ============================================================================
# ANSWERS TABLE
# ============================================================================
answers_table = Table(
    "answers",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column(
        "question_id",
        UUID,
        ForeignKey("questions.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "author_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column("content", Text, nullable=False),
    Column("is_accepted", Boolean, nullable=False, server_default="false"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column("deleted_at", TIMESTAMP(timezone=True), nullable=True),
)

Index("idx_answers_question_id", answers_table.c.question_id)
Index("idx_answers_author_id", answers_table.c.author_id)
# At most one accepted answer per question
Index(
    "uq_answers_one_accepted",
    answers_table.c.question_id,
    unique=True,
    postgresql_where=answers_table.c.is_accepted,
)

# ============================================================================
# SOLUTIONS TABLE
# ============================================================================
solutions_table = Table(
    "solutions",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column(
        "author_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column("title", String(255), nullable=False),
    Column("description", Text, nullable=False, server_default=""),
    Column("tags", postgresql.ARRAY(String(30)), nullable=False, server_default="{}"),
    Column("duration", Integer, nullable=False, server_default="0"),
    Column(
        "duration_type",
        postgresql.ENUM(
            "minutes", "hours", "days", name="duration_type", create_type=False
        ),
        nullable=False,
        server_default="minutes",
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column("deleted_at", TIMESTAMP(timezone=True), nullable=True),
    CheckConstraint("duration >= 0", name="ck_solutions_duration_non_negative"),
)

Index("idx_solutions_author_id", solutions_table.c.author_id)

# ============================================================================
# SOLUTION STEPS TABLE (ordered, removed with their solution)
# ============================================================================
solution_steps_table = Table(
    "solution_steps",
    metadata,
    Column(
        "solution_id",
        UUID,
        ForeignKey("solutions.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column("position", Integer, primary_key=True),
    Column("heading", String(255), nullable=False),
    Column("body", Text, nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("position >= 1", name="ck_solution_steps_position_positive"),
)

# ============================================================================
# REACTIONS TABLE (polymorphic: question, answer, solution)
# ============================================================================
reactions_table = Table(
    "reactions",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("user_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
    Column("content_type", CONTENT_TYPE_ENUM, nullable=False),
    Column("content_id", UUID, nullable=False),
    Column("is_like", Boolean, nullable=False),
    Column("parent_id", UUID, nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint(
        "user_id", "content_type", "content_id", name="uq_reaction_user_content"
    ),
)

Index(
    "idx_reactions_content",
    reactions_table.c.content_type,
    reactions_table.c.content_id,
)

# ============================================================================
# COMMENTS TABLE (polymorphic, threaded)
# ============================================================================
comments_table = Table(
    "comments",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column(
        "author_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column("content_type", CONTENT_TYPE_ENUM, nullable=False),
    Column("content_id", UUID, nullable=False),
    Column("body", Text, nullable=False),
    Column(
        "parent_id",
        UUID,
        ForeignKey("comments.id", ondelete="CASCADE"),
        nullable=True,
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column("deleted_at", TIMESTAMP(timezone=True), nullable=True),
)

Index(
    "idx_comments_content",
    comments_table.c.content_type,
    comments_table.c.content_id,
)
Index("idx_comments_parent_id", comments_table.c.parent_id)
