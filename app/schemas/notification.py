"""Notification API schemas."""

from datetime import datetime

from pydantic import AliasChoices, Field

from app.domain.enums import NotificationType
from app.schemas.common import CamelModel


class NotificationCreateRequest(CamelModel):
    """Request body for POST /notifications.

    recipientUserId may be the recipient's external id or internal id.
    """

    recipient_user_id: str = Field(
        ...,
        min_length=1,
        validation_alias=AliasChoices("recipientUserId", "recipient_user_id", "recipient"),
    )
    title: str = Field(..., min_length=1, max_length=200)
    message: str | None = Field(default=None, max_length=2000)
    type: NotificationType = NotificationType.GENERIC
    related_task_id: str | None = None


class NotificationResponse(CamelModel):
    id: str
    recipient_user_id: str
    related_task_id: str | None = None
    title: str
    message: str | None = None
    type: NotificationType
    is_read: bool
    created_at: datetime
    read_at: datetime | None = None


class UnreadCountResponse(CamelModel):
    count: int
