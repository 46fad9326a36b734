"""Task API schemas."""

from datetime import date, datetime

from pydantic import AliasChoices, Field

from app.domain.enums import TaskStatus
from app.schemas.common import CamelModel
from app.schemas.user import UserSummaryResponse


class TaskCreateRequest(CamelModel):
    """Request body for POST /tasks. Status is not accepted; new tasks start Pending."""

    title: str = Field(..., min_length=1, max_length=100)
    description: str | None = Field(default=None, max_length=500)
    due_date: date | None = None
    assigned_to_external_id: str | None = None


class TaskUpdateRequest(CamelModel):
    """Request body for PUT /tasks/{id}. Omitting the assignee unassigns the task."""

    title: str = Field(..., min_length=1, max_length=100)
    description: str | None = Field(default=None, max_length=500)
    due_date: date | None = None
    status: TaskStatus = Field(
        ..., validation_alias=AliasChoices("status", "itemStatus")
    )
    assigned_to_external_id: str | None = None


class TaskStatusUpdateRequest(CamelModel):
    """Request body for PATCH /tasks/{id}/status."""

    status: TaskStatus


class TaskListItemResponse(CamelModel):
    id: str
    title: str
    status: TaskStatus
    due_date: date | None = None
    is_overdue: bool = False
    assigned_to: UserSummaryResponse | None = None
    created_by: UserSummaryResponse | None = None


class TaskDetailResponse(TaskListItemResponse):
    description: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
