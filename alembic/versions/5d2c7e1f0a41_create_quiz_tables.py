"""create users, quizzes and quiz_responses

Revision ID: 5d2c7e1f0a41
Revises:
Create Date: 2026-10-19
"""

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision = "5d2c7e1f0a41"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.String(length=36), primary_key=True),
        sa.Column("name", sa.Text(), nullable=False),
        sa.Column("school", sa.Text(), nullable=False),
        sa.Column("phone_number", sa.String(length=50), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index("ix_users_id", "users", ["id"])

    op.create_table(
        "quizzes",
        sa.Column("id", sa.String(length=36), primary_key=True),
        sa.Column("title", sa.Text(), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("questions", sa.JSON(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index("ix_quizzes_id", "quizzes", ["id"])

    op.create_table(
        "quiz_responses",
        sa.Column("id", sa.String(length=36), primary_key=True),
        sa.Column("user_id", sa.String(length=36), sa.ForeignKey("users.id"), nullable=False),
        sa.Column("quiz_id", sa.String(length=36), sa.ForeignKey("quizzes.id"), nullable=False),
        sa.Column("answers", sa.JSON(), nullable=False),
        sa.Column("score", sa.Integer(), nullable=True),
        sa.Column("completed_at", sa.DateTime(timezone=True), nullable=False),
        # One response per user per quiz
        sa.UniqueConstraint("user_id", "quiz_id", name="uq_quiz_response_user_quiz"),
    )
    op.create_index("ix_quiz_responses_id", "quiz_responses", ["id"])
    op.create_index("ix_quiz_responses_user_id", "quiz_responses", ["user_id"])
    op.create_index("ix_quiz_responses_quiz_id", "quiz_responses", ["quiz_id"])
    op.create_index("ix_quiz_responses_completed_at", "quiz_responses", ["completed_at"])


def downgrade() -> None:
    op.drop_table("quiz_responses")
    op.drop_table("quizzes")
    op.drop_table("users")
