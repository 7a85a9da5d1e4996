"""module book tasks and tags"""
from __future__ import annotations

from alembic import op
import sqlalchemy as sa

revision = "0001_module_book_tasks"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "tasks",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("sort_order", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("name", sa.String(length=200), nullable=False),
        sa.Column("deadline", sa.String(length=16), nullable=False),
        sa.Column("module", sa.String(length=20), nullable=False),
        sa.Column("description", sa.Text(), nullable=False, server_default=""),
        sa.Column("workload", sa.String(length=1), nullable=False),
        sa.Column("done_status", sa.String(length=5), nullable=False, server_default="false"),
        sa.Column("recurrence", sa.String(length=20), nullable=False, server_default=""),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
    )
    op.create_index("ix_tasks_sort_order", "tasks", ["sort_order"], unique=False)
    op.create_index("ix_tasks_module", "tasks", ["module"], unique=False)

    op.create_table(
        "task_tags",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column(
            "task_id",
            sa.Integer(),
            sa.ForeignKey("tasks.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("tag_name", sa.String(length=100), nullable=False),
    )
    op.create_index("ix_task_tags_task_id", "task_tags", ["task_id"], unique=False)


def downgrade() -> None:
    op.drop_index("ix_task_tags_task_id", table_name="task_tags")
    op.drop_table("task_tags")
    op.drop_index("ix_tasks_module", table_name="tasks")
    op.drop_index("ix_tasks_sort_order", table_name="tasks")
    op.drop_table("tasks")
