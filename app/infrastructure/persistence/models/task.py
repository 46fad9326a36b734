"""Task ORM model. Created by one user, optionally assigned to another."""

from datetime import date, datetime

from sqlalchemy import Date, DateTime, Enum, ForeignKey, Index, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.domain.enums import TaskStatus
from app.infrastructure.persistence.database import Base
from app.infrastructure.persistence.models.mixins import CreatedAtMixin, CuidMixin
from app.infrastructure.persistence.models.user import User

TASK_TITLE_MAX_LENGTH = 100
TASK_DESCRIPTION_MAX_LENGTH = 500


class Task(CuidMixin, CreatedAtMixin, Base):
    """Task. Table: task.

    Deleting the creator is restricted; deleting the assignee unassigns.
    Relationships raise on lazy access: repositories load them explicitly.
    """

    __tablename__ = "task"

    title: Mapped[str] = mapped_column(String(TASK_TITLE_MAX_LENGTH), nullable=False)
    description: Mapped[str | None] = mapped_column(
        String(TASK_DESCRIPTION_MAX_LENGTH), nullable=True
    )
    status: Mapped[TaskStatus] = mapped_column(
        Enum(
            TaskStatus,
            name="task_status",
            native_enum=False,
            length=32,
            values_callable=lambda enum: [member.value for member in enum],
        ),
        nullable=False,
        default=TaskStatus.PENDING,
        server_default=TaskStatus.PENDING.value,
        index=True,
    )
    due_date: Mapped[date | None] = mapped_column(Date, nullable=True, index=True)
    created_by_user_id: Mapped[str] = mapped_column(
        String, ForeignKey("app_user.id", ondelete="RESTRICT"), nullable=False, index=True
    )
    assigned_to_user_id: Mapped[str | None] = mapped_column(
        String, ForeignKey("app_user.id", ondelete="SET NULL"), nullable=True, index=True
    )
    updated_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True
    )

    creator: Mapped[User] = relationship(
        User, foreign_keys=[created_by_user_id], lazy="raise"
    )
    assignee: Mapped[User | None] = relationship(
        User, foreign_keys=[assigned_to_user_id], lazy="raise"
    )

    __table_args__ = (
        Index("ix_task_creator_status", "created_by_user_id", "status"),
        Index("ix_task_assignee_status", "assigned_to_user_id", "status"),
    )
