"""DTOs for task use cases (no dependency on ORM)."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime

from app.application.dtos.user import UserSummary
from app.domain.enums import TaskStatus


@dataclass(frozen=True)
class TaskFilters:
    """Optional list filters; None means "do not filter on this"."""

    search: str | None = None
    status: TaskStatus | None = None
    due_date_from: date | None = None
    due_date_to: date | None = None


@dataclass(frozen=True)
class TaskRecord:
    """Task as stored, with creator and assignee summaries loaded."""

    id: str
    title: str
    description: str | None
    status: TaskStatus
    due_date: date | None
    created_by_user_id: str
    assigned_to_user_id: str | None
    created_at: datetime
    updated_at: datetime | None
    creator: UserSummary | None = None
    assignee: UserSummary | None = None


@dataclass(frozen=True)
class TaskCreate:
    """Data for inserting a task (ids already resolved to internal users)."""

    title: str
    created_by_user_id: str
    description: str | None = None
    due_date: date | None = None
    assigned_to_user_id: str | None = None
    status: TaskStatus = TaskStatus.PENDING
    created_at: datetime | None = None


@dataclass(frozen=True)
class TaskUpdate:
    """Full overwrite of a task's mutable fields."""

    id: str
    title: str
    description: str | None
    status: TaskStatus
    due_date: date | None
    assigned_to_user_id: str | None
    updated_at: datetime


@dataclass(frozen=True)
class CreateTaskCommand:
    """Caller input for creating a task; the assignee is an external id."""

    title: str
    description: str | None = None
    due_date: date | None = None
    assigned_to_external_id: str | None = None


@dataclass(frozen=True)
class UpdateTaskCommand:
    """Caller input for a full task update. A missing assignee clears the assignment."""

    title: str
    status: TaskStatus
    description: str | None = None
    due_date: date | None = None
    assigned_to_external_id: str | None = None


@dataclass(frozen=True)
class TaskListItem:
    """Task as shown in lists and the dashboard."""

    id: str
    title: str
    status: TaskStatus
    due_date: date | None
    is_overdue: bool
    assigned_to: UserSummary | None
    created_by: UserSummary | None


@dataclass(frozen=True)
class TaskDetail(TaskListItem):
    """List item plus description and timestamps."""

    description: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
