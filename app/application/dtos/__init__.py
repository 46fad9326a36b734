"""Application DTOs (no ORM dependency)."""

from app.application.dtos.common import PagedResult
from app.application.dtos.dashboard import DashboardSummary, TaskCounts
from app.application.dtos.notification import (
    CreateNotificationCommand,
    NotificationCreate,
    NotificationResult,
)
from app.application.dtos.task import (
    CreateTaskCommand,
    TaskCreate,
    TaskDetail,
    TaskFilters,
    TaskListItem,
    TaskRecord,
    TaskUpdate,
    UpdateTaskCommand,
)
from app.application.dtos.user import (
    DirectoryUser,
    ProvisionResult,
    UserCreate,
    UserResult,
    UserSummary,
)

__all__ = [
    "CreateNotificationCommand",
    "CreateTaskCommand",
    "DashboardSummary",
    "DirectoryUser",
    "NotificationCreate",
    "NotificationResult",
    "PagedResult",
    "ProvisionResult",
    "TaskCounts",
    "TaskCreate",
    "TaskDetail",
    "TaskFilters",
    "TaskListItem",
    "TaskRecord",
    "TaskUpdate",
    "UpdateTaskCommand",
    "UserCreate",
    "UserResult",
    "UserSummary",
]
