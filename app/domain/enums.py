"""Domain enumerations for the Taskboard application.

Enums represent fixed sets of domain values (e.g. task status).
"""

from enum import Enum


class TaskStatus(str, Enum):
    """Task lifecycle status.

    New tasks always start as PENDING regardless of what the caller sends.
    """

    PENDING = "Pending"
    IN_PROGRESS = "InProgress"
    DONE = "Done"


class NotificationType(str, Enum):
    """Kind of notification delivered to a user."""

    GENERIC = "Generic"
    TASK_ASSIGNED = "TaskAssigned"
    TASK_DUE_SOON = "TaskDueSoon"
    TASK_STATUS_CHANGED = "TaskStatusChanged"


class TaskScope(str, Enum):
    """Which side of the creator/assignee relation a task list shows."""

    ASSIGNED = "assigned"
    CREATED = "created"
    ALL = "all"

    @classmethod
    def parse(cls, value: str | None) -> "TaskScope":
        """Map a raw query value to a scope; unknown values mean ALL."""
        if value:
            normalized = value.strip().lower()
            for scope in cls:
                if scope.value == normalized:
                    return scope
        return cls.ALL
