"""add solution steps

Numbered steps of a solution, removed together with it.

Revision ID: 9c4d2e81a6f3
Revises: 3f1c9a2d7b04
Create Date: 2026-10-17 16:40:12.904517

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "9c4d2e81a6f3"
down_revision: Union[str, Sequence[str], None] = "3f1c9a2d7b04"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        "solution_steps",
        sa.Column("solution_id", sa.UUID(), nullable=False),
        sa.Column("position", sa.Integer(), nullable=False),
        sa.Column("heading", sa.String(255), nullable=False),
        sa.Column("body", sa.Text(), nullable=False),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.ForeignKeyConstraint(["solution_id"], ["solutions.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("solution_id", "position"),
        sa.CheckConstraint("position >= 1", name="ck_solution_steps_position_positive"),
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table("solution_steps")
