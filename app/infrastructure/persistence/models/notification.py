"""Notification ORM model. Only is_read/read_at change after insert."""

from datetime import datetime

from sqlalchemy import Boolean, DateTime, Enum, ForeignKey, Index, String, text
from sqlalchemy.orm import Mapped, mapped_column

from app.domain.enums import NotificationType
from app.infrastructure.persistence.database import Base
from app.infrastructure.persistence.models.mixins import CreatedAtMixin, CuidMixin

NOTIFICATION_TITLE_MAX_LENGTH = 200
NOTIFICATION_MESSAGE_MAX_LENGTH = 2000


class Notification(CuidMixin, CreatedAtMixin, Base):
    """Notification for one recipient. Table: notification."""

    __tablename__ = "notification"

    recipient_user_id: Mapped[str] = mapped_column(
        String, ForeignKey("app_user.id", ondelete="CASCADE"), nullable=False
    )
    related_task_id: Mapped[str | None] = mapped_column(
        String, ForeignKey("task.id", ondelete="SET NULL"), nullable=True
    )
    title: Mapped[str] = mapped_column(
        String(NOTIFICATION_TITLE_MAX_LENGTH), nullable=False
    )
    message: Mapped[str | None] = mapped_column(
        String(NOTIFICATION_MESSAGE_MAX_LENGTH), nullable=True
    )
    type: Mapped[NotificationType] = mapped_column(
        Enum(
            NotificationType,
            name="notification_type",
            native_enum=False,
            length=32,
            values_callable=lambda enum: [member.value for member in enum],
        ),
        nullable=False,
        default=NotificationType.GENERIC,
        server_default=NotificationType.GENERIC.value,
    )
    is_read: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False, server_default=text("false")
    )
    read_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True
    )

    __table_args__ = (
        Index("ix_notification_recipient_read", "recipient_user_id", "is_read"),
        Index("ix_notification_recipient_created", "recipient_user_id", "created_at"),
    )
