"""initial_schema_users_tasks_notifications

Revision ID: 3f1c2a9b7d40
Revises:
Create Date: 2026-10-19 09:00:00.000000

"""

from collections.abc import Sequence
from typing import Union

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision: str = "3f1c2a9b7d40"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        "app_user",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("external_id", sa.String(length=64), nullable=False),
        sa.Column("name", sa.String(length=100), nullable=False),
        sa.Column("email", sa.String(length=256), nullable=False),
        sa.Column("last_login_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        op.f("ix_app_user_external_id"), "app_user", ["external_id"], unique=True
    )

    op.create_table(
        "task",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("title", sa.String(length=100), nullable=False),
        sa.Column("description", sa.String(length=500), nullable=True),
        sa.Column(
            "status", sa.String(length=32), server_default="Pending", nullable=False
        ),
        sa.Column("due_date", sa.Date(), nullable=True),
        sa.Column("created_by_user_id", sa.String(), nullable=False),
        sa.Column("assigned_to_user_id", sa.String(), nullable=True),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.ForeignKeyConstraint(
            ["created_by_user_id"], ["app_user.id"], ondelete="RESTRICT"
        ),
        sa.ForeignKeyConstraint(
            ["assigned_to_user_id"], ["app_user.id"], ondelete="SET NULL"
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_task_status"), "task", ["status"])
    op.create_index(op.f("ix_task_due_date"), "task", ["due_date"])
    op.create_index(op.f("ix_task_created_by_user_id"), "task", ["created_by_user_id"])
    op.create_index(op.f("ix_task_assigned_to_user_id"), "task", ["assigned_to_user_id"])
    op.create_index("ix_task_creator_status", "task", ["created_by_user_id", "status"])
    op.create_index("ix_task_assignee_status", "task", ["assigned_to_user_id", "status"])

    op.create_table(
        "notification",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("recipient_user_id", sa.String(), nullable=False),
        sa.Column("related_task_id", sa.String(), nullable=True),
        sa.Column("title", sa.String(length=200), nullable=False),
        sa.Column("message", sa.String(length=2000), nullable=True),
        sa.Column(
            "type", sa.String(length=32), server_default="Generic", nullable=False
        ),
        sa.Column("is_read", sa.Boolean(), server_default=sa.text("false"), nullable=False),
        sa.Column("read_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.ForeignKeyConstraint(
            ["recipient_user_id"], ["app_user.id"], ondelete="CASCADE"
        ),
        sa.ForeignKeyConstraint(["related_task_id"], ["task.id"], ondelete="SET NULL"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "ix_notification_recipient_read", "notification", ["recipient_user_id", "is_read"]
    )
    op.create_index(
        "ix_notification_recipient_created",
        "notification",
        ["recipient_user_id", "created_at"],
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index("ix_notification_recipient_created", table_name="notification")
    op.drop_index("ix_notification_recipient_read", table_name="notification")
    op.drop_table("notification")
    op.drop_index("ix_task_assignee_status", table_name="task")
    op.drop_index("ix_task_creator_status", table_name="task")
    op.drop_index(op.f("ix_task_assigned_to_user_id"), table_name="task")
    op.drop_index(op.f("ix_task_created_by_user_id"), table_name="task")
    op.drop_index(op.f("ix_task_due_date"), table_name="task")
    op.drop_index(op.f("ix_task_status"), table_name="task")
    op.drop_table("task")
    op.drop_index(op.f("ix_app_user_external_id"), table_name="app_user")
    op.drop_table("app_user")
