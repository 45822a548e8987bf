"""Initial schema — tasks, iterations, action log, files, profiles.

Revision ID: 001
Revises: None
Create Date: 2026-10-18
"""

from typing import Sequence, Union

import sqlalchemy as sa
from sqlalchemy.dialects.postgresql import JSONB

from alembic import op

revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # Tasks
    op.create_table(
        "tasks",
        sa.Column("task_id", sa.String(100), primary_key=True),
        sa.Column("created_by", sa.String(100), nullable=True),
        sa.Column(
            "created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()
        ),
    )

    # Current stage per task
    op.create_table(
        "task_iterations",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("task_id", sa.String(100), unique=True, nullable=False),
        sa.Column("current_stage", sa.String(100), nullable=True),
        sa.Column(
            "updated_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()
        ),
    )

    # Append-only action log
    op.create_table(
        "task_actions",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("task_id", sa.String(100), nullable=False),
        sa.Column("user_id", sa.String(100), nullable=True),
        sa.Column("action_type", sa.String(50), nullable=False),
        sa.Column("metadata", JSONB, nullable=True),
        sa.Column(
            "created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()
        ),
    )
    op.create_index(
        "idx_task_actions_lookup", "task_actions", ["task_id", "action_type", "created_at"]
    )

    # Files attached to tasks
    op.create_table(
        "files",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("task_id", sa.String(100), nullable=False),
        sa.Column("taken_by", sa.String(100), nullable=True),
        sa.Column("assigned_to", JSONB, nullable=True),
        sa.Column(
            "created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()
        ),
    )
    op.create_index("idx_files_task", "files", ["task_id"])

    # Profiles
    op.create_table(
        "profiles",
        sa.Column("id", sa.String(100), primary_key=True),
        sa.Column("name", sa.String(200), nullable=True),
        sa.Column("email", sa.Text, nullable=True),
        sa.Column("role", sa.String(100), nullable=True),
    )


def downgrade() -> None:
    op.drop_table("profiles")
    op.drop_index("idx_files_task", table_name="files")
    op.drop_table("files")
    op.drop_index("idx_task_actions_lookup", table_name="task_actions")
    op.drop_table("task_actions")
    op.drop_table("task_iterations")
    op.drop_table("tasks")
