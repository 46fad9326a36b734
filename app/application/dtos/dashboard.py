"""DTOs for the dashboard summary (no dependency on ORM)."""

from dataclasses import dataclass, field

from app.application.dtos.task import TaskListItem


@dataclass(frozen=True)
class TaskCounts:
    """Per-status totals; total is always their sum."""

    pending: int = 0
    in_progress: int = 0
    done: int = 0

    @property
    def total(self) -> int:
        return self.pending + self.in_progress + self.done


@dataclass(frozen=True)
class DashboardSummary:
    relevant_period: str
    tasks_due_today: list[TaskListItem] = field(default_factory=list)
    tasks_due_this_week: list[TaskListItem] = field(default_factory=list)
    tasks_due_this_month: list[TaskListItem] = field(default_factory=list)
    upcoming_tasks: list[TaskListItem] = field(default_factory=list)
    counts: TaskCounts = field(default_factory=TaskCounts)
