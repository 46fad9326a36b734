"""Dashboard: tasks due today / this week / this month / upcoming, plus status counts."""

from __future__ import annotations

from datetime import date

from app.application.dtos.dashboard import DashboardSummary, TaskCounts
from app.application.dtos.task import TaskFilters, TaskListItem
from app.application.services.task_service import TaskService
from app.application.services.user_service import UserService
from app.domain.enums import TaskScope, TaskStatus
from app.shared.utils.datetime import (
    DateWindow,
    month_window,
    upcoming_window,
    utc_today,
    week_window,
)

TOP_N = 5

PERIOD_TODAY = "for today"
PERIOD_WEEK = "for this week"
PERIOD_MONTH = "for this month"
PERIOD_UPCOMING = "upcoming"


def relevant_period(
    today: list[TaskListItem], week: list[TaskListItem], month: list[TaskListItem]
) -> str:
    """First non-empty window wins: today, then week, then month."""
    if today:
        return PERIOD_TODAY
    if week:
        return PERIOD_WEEK
    if month:
        return PERIOD_MONTH
    return PERIOD_UPCOMING


class DashboardService:
    """Composes task and user services into the dashboard summary. No caching."""

    def __init__(self, task_service: TaskService, user_service: UserService) -> None:
        self._tasks = task_service
        self._users = user_service

    async def _due_within(self, external_id: str, window: DateWindow) -> list[TaskListItem]:
        paged = await self._tasks.get_tasks(
            external_id,
            TaskFilters(due_date_from=window.start, due_date_to=window.end),
            page=1,
            page_size=TOP_N,
            scope=TaskScope.ALL,
        )
        return paged.items

    async def _count(self, external_id: str, status: TaskStatus) -> int:
        paged = await self._tasks.get_tasks(
            external_id,
            TaskFilters(status=status),
            page=1,
            page_size=1,
            scope=TaskScope.ALL,
        )
        return paged.total_count

    async def get_dashboard(
        self, external_id: str, today: date | None = None
    ) -> DashboardSummary:
        await self._users.get_current_user(external_id)
        today = today or utc_today()

        due_today = await self._due_within(external_id, DateWindow(today, today))
        due_week = await self._due_within(external_id, week_window(today))
        due_month = await self._due_within(external_id, month_window(today))
        upcoming = await self._due_within(external_id, upcoming_window(today))

        counts = TaskCounts(
            pending=await self._count(external_id, TaskStatus.PENDING),
            in_progress=await self._count(external_id, TaskStatus.IN_PROGRESS),
            done=await self._count(external_id, TaskStatus.DONE),
        )
        return DashboardSummary(
            relevant_period=relevant_period(due_today, due_week, due_month),
            tasks_due_today=due_today,
            tasks_due_this_week=due_week,
            tasks_due_this_month=due_month,
            upcoming_tasks=upcoming,
            counts=counts,
        )
