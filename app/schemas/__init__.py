"""Pydantic request/response schemas for the API."""

from app.schemas.common import CamelModel, ErrorResponse, PagedResponse
from app.schemas.dashboard import DashboardResponse, TaskCountsResponse
from app.schemas.health import HealthResponse, ReadinessErrorResponse
from app.schemas.notification import (
    NotificationCreateRequest,
    NotificationResponse,
    UnreadCountResponse,
)
from app.schemas.task import (
    TaskCreateRequest,
    TaskDetailResponse,
    TaskListItemResponse,
    TaskStatusUpdateRequest,
    TaskUpdateRequest,
)
from app.schemas.user import (
    UserProvisionRequest,
    UserResponse,
    UserSummaryResponse,
    UserUpdateRequest,
)

__all__ = [
    "CamelModel",
    "DashboardResponse",
    "ErrorResponse",
    "HealthResponse",
    "NotificationCreateRequest",
    "NotificationResponse",
    "PagedResponse",
    "ReadinessErrorResponse",
    "TaskCountsResponse",
    "TaskCreateRequest",
    "TaskDetailResponse",
    "TaskListItemResponse",
    "TaskStatusUpdateRequest",
    "TaskUpdateRequest",
    "UnreadCountResponse",
    "UserProvisionRequest",
    "UserResponse",
    "UserSummaryResponse",
    "UserUpdateRequest",
]
