"""Dashboard API schemas."""

from pydantic import Field

from app.schemas.common import CamelModel
from app.schemas.task import TaskListItemResponse


class TaskCountsResponse(CamelModel):
    pending: int = 0
    in_progress: int = 0
    done: int = 0
    total: int = 0


class DashboardResponse(CamelModel):
    """Response for GET /dashboard."""

    relevant_period: str
    tasks_due_today: list[TaskListItemResponse] = Field(default_factory=list)
    tasks_due_this_week: list[TaskListItemResponse] = Field(default_factory=list)
    tasks_due_this_month: list[TaskListItemResponse] = Field(default_factory=list)
    upcoming_tasks: list[TaskListItemResponse] = Field(default_factory=list)
    counts: TaskCountsResponse = Field(default_factory=TaskCountsResponse)
