"""Employee documents with embedded todo/done task lists."""

from __future__ import annotations

import sqlalchemy as sa

from alembic import op

revision = "20261019_0001"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "employees",
        sa.Column("emp_id", sa.Integer(), autoincrement=False, nullable=False),
        sa.Column("first_name", sa.Text(), server_default="", nullable=False),
        sa.Column("last_name", sa.Text(), server_default="", nullable=False),
        sa.Column("todo_json", sa.Text(), nullable=True),
        sa.Column("done_json", sa.Text(), nullable=True),
        sa.PrimaryKeyConstraint("emp_id"),
    )


def downgrade() -> None:
    op.drop_table("employees")
