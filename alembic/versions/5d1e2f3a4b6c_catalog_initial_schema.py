"""catalog_initial_schema

Revision ID: 5d1e2f3a4b6c
Revises:
Create Date: 2026-10-18 12:00:00.000000
"""
from collections.abc import Sequence

import sqlalchemy as sa
from alembic import op

revision: str = "5d1e2f3a4b6c"
down_revision: str | None = None
branch_labels: Sequence[str] | None = None
depends_on: Sequence[str] | None = None


def upgrade() -> None:
    op.create_table(
        "categories",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("title", sa.Text(), nullable=False),
        sa.Column("slug", sa.Text(), nullable=False),
        sa.UniqueConstraint("title", name="uq_categories_title"),
        sa.UniqueConstraint("slug", name="uq_categories_slug"),
        sqlite_autoincrement=True,
    )

    op.create_table(
        "questions",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("text", sa.Text(), nullable=False),
        sa.Column("category_id", sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(
            ["category_id"],
            ["categories.id"],
            name="fk_questions_category_id_categories",
            ondelete="RESTRICT",
            onupdate="CASCADE",
        ),
        sqlite_autoincrement=True,
    )
    op.create_index("idx_questions_category_id", "questions", ["category_id"])

    op.create_table(
        "options",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("text", sa.Text(), nullable=False),
        sa.Column("is_correct", sa.Boolean(), nullable=False),
        sa.Column("question_id", sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(
            ["question_id"],
            ["questions.id"],
            name="fk_options_question_id_questions",
            ondelete="RESTRICT",
            onupdate="CASCADE",
        ),
        sqlite_autoincrement=True,
    )
    op.create_index("idx_options_question_id", "options", ["question_id"])


def downgrade() -> None:
    op.drop_index("idx_options_question_id", table_name="options")
    op.drop_table("options")
    op.drop_index("idx_questions_category_id", table_name="questions")
    op.drop_table("questions")
    op.drop_table("categories")
