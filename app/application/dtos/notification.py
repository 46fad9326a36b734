"""DTOs for notification use cases (no dependency on ORM)."""

from dataclasses import dataclass
from datetime import datetime

from app.domain.enums import NotificationType


@dataclass(frozen=True)
class CreateNotificationCommand:
    """Caller input; recipient may be an external id or an internal user id."""

    recipient: str
    title: str
    message: str | None = None
    type: NotificationType = NotificationType.GENERIC
    related_task_id: str | None = None


@dataclass(frozen=True)
class NotificationCreate:
    """Data for inserting a notification (recipient resolved to internal id)."""

    recipient_user_id: str
    title: str
    message: str | None = None
    type: NotificationType = NotificationType.GENERIC
    related_task_id: str | None = None


@dataclass(frozen=True)
class NotificationResult:
    """Notification read-model."""

    id: str
    recipient_user_id: str
    related_task_id: str | None
    title: str
    message: str | None
    type: NotificationType
    is_read: bool
    created_at: datetime
    read_at: datetime | None
