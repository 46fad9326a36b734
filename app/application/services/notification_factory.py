"""Builds notifications for task lifecycle events."""

from __future__ import annotations

from app.application.dtos.notification import NotificationCreate
from app.application.dtos.task import TaskRecord
from app.domain.enums import NotificationType, TaskStatus
from app.domain.exceptions import ValidationException

_STATUS_LABELS = {
    TaskStatus.PENDING: "Pending",
    TaskStatus.IN_PROGRESS: "In progress",
    TaskStatus.DONE: "Done",
}


class NotificationFactory:
    """Templates for task notifications. Stateless."""

    def task_assigned(self, task: TaskRecord) -> NotificationCreate:
        """Notification for the task's assignee. Raises ValidationException if unassigned."""
        if not task.assigned_to_user_id:
            raise ValidationException(
                "Task has no assignee to notify", field="assignedToUserId"
            )
        message = f'You have been assigned task "{task.title}"'
        if task.due_date is not None:
            message += f" with due date {task.due_date.isoformat()}."
        else:
            message += "."
        return NotificationCreate(
            recipient_user_id=task.assigned_to_user_id,
            title=f"Assigned task: {task.title}",
            message=message,
            type=NotificationType.TASK_ASSIGNED,
            related_task_id=task.id,
        )

    def task_status_changed(
        self, task: TaskRecord, recipient_user_id: str
    ) -> NotificationCreate:
        label = _STATUS_LABELS.get(task.status, task.status.value)
        return NotificationCreate(
            recipient_user_id=recipient_user_id,
            title=f"Task status changed: {task.title}",
            message=f'Task "{task.title}" is now {label}.',
            type=NotificationType.TASK_STATUS_CHANGED,
            related_task_id=task.id,
        )
