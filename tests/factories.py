"""Builders for application DTOs used across unit and API tests."""

from datetime import UTC, date, datetime

from app.application.dtos.notification import NotificationResult
from app.application.dtos.task import TaskRecord
from app.application.dtos.user import UserResult, UserSummary
from app.domain.enums import NotificationType, TaskStatus

CALLER_EXTERNAL_ID = "ext-caller"
CREATED_AT = datetime(2025, 1, 1, tzinfo=UTC)


def make_user(
    user_id: str = "u1",
    external_id: str = CALLER_EXTERNAL_ID,
    name: str = "Caller",
    email: str = "caller@example.com",
) -> UserResult:
    return UserResult(
        id=user_id,
        external_id=external_id,
        name=name,
        email=email,
        created_at=CREATED_AT,
    )


def summary_of(user: UserResult) -> UserSummary:
    return UserSummary(
        id=user.id, external_id=user.external_id, name=user.name, email=user.email
    )


def make_task(
    task_id: str = "t1",
    title: str = "Write report",
    created_by: str = "u1",
    assigned_to: str | None = None,
    status: TaskStatus = TaskStatus.PENDING,
    due_date: date | None = None,
    description: str | None = None,
) -> TaskRecord:
    return TaskRecord(
        id=task_id,
        title=title,
        description=description,
        status=status,
        due_date=due_date,
        created_by_user_id=created_by,
        assigned_to_user_id=assigned_to,
        created_at=CREATED_AT,
        updated_at=None,
    )


def make_notification(
    notification_id: str = "n1",
    recipient: str = "u1",
    is_read: bool = False,
    title: str = "Hello",
) -> NotificationResult:
    return NotificationResult(
        id=notification_id,
        recipient_user_id=recipient,
        related_task_id=None,
        title=title,
        message=None,
        type=NotificationType.GENERIC,
        is_read=is_read,
        created_at=CREATED_AT,
        read_at=None,
    )
