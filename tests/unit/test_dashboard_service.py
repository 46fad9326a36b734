"""DashboardService over a real TaskService and an in-memory task repository."""

from datetime import date
from unittest.mock import AsyncMock

import pytest

from app.application.dtos.common import PagedResult
from app.application.dtos.task import TaskFilters, TaskRecord
from app.application.services.dashboard_service import (
    PERIOD_MONTH,
    PERIOD_TODAY,
    PERIOD_UPCOMING,
    PERIOD_WEEK,
    TOP_N,
    DashboardService,
)
from app.application.services.task_service import TaskService
from app.domain.enums import TaskStatus
from tests.factories import make_task, make_user

CALLER = make_user()
TODAY = date(2025, 1, 15)  # Wednesday; week is Jan 12..18


class InMemoryTaskRepository:
    """Implements the read half of ITaskRepository over a list."""

    def __init__(self, tasks: list[TaskRecord]) -> None:
        self.tasks = tasks

    def _matching(self, user_id: str, filters: TaskFilters) -> list[TaskRecord]:
        rows = [
            t
            for t in self.tasks
            if user_id in (t.created_by_user_id, t.assigned_to_user_id)
        ]
        if filters.status is not None:
            rows = [t for t in rows if t.status is filters.status]
        if filters.due_date_from is not None:
            rows = [t for t in rows if t.due_date and t.due_date >= filters.due_date_from]
        if filters.due_date_to is not None:
            rows = [t for t in rows if t.due_date and t.due_date <= filters.due_date_to]
        return rows

    async def get_tasks_for_user(self, user_id, filters, page, page_size):
        rows = self._matching(user_id, filters)
        start = (page - 1) * page_size
        return PagedResult(
            items=rows[start : start + page_size],
            total_count=len(rows),
            page=page,
            page_size=page_size,
        )

    async def get_task_count(self, user_id, filters, *, created_only=False):
        rows = self._matching(user_id, filters)
        if created_only:
            rows = [t for t in rows if t.created_by_user_id == user_id]
        return len(rows)


def _dashboard(tasks: list[TaskRecord]) -> DashboardService:
    users = AsyncMock()
    users.get_current_user = AsyncMock(return_value=CALLER)
    task_service = TaskService(InMemoryTaskRepository(tasks), users)
    return DashboardService(task_service, users)


async def test_empty_dashboard_is_upcoming_with_zero_counts() -> None:
    summary = await _dashboard([]).get_dashboard("ext-caller", today=TODAY)
    assert summary.relevant_period == PERIOD_UPCOMING
    assert summary.tasks_due_today == []
    assert summary.counts.total == 0


async def test_windows_and_relevant_period_today() -> None:
    tasks = [
        make_task(task_id="today", due_date=TODAY),
        make_task(task_id="sat", due_date=date(2025, 1, 18)),
        make_task(task_id="month", due_date=date(2025, 1, 30)),
        make_task(task_id="feb", due_date=date(2025, 2, 10)),
        make_task(task_id="past", due_date=date(2025, 1, 2), status=TaskStatus.DONE),
        make_task(task_id="nodue", status=TaskStatus.IN_PROGRESS),
    ]
    summary = await _dashboard(tasks).get_dashboard("ext-caller", today=TODAY)
    assert summary.relevant_period == PERIOD_TODAY
    assert [t.id for t in summary.tasks_due_today] == ["today"]
    assert {t.id for t in summary.tasks_due_this_week} == {"today", "sat"}
    assert {t.id for t in summary.tasks_due_this_month} == {"today", "sat", "month", "past"}
    assert {t.id for t in summary.upcoming_tasks} == {"sat", "month", "feb"}
    assert summary.counts.pending == 4
    assert summary.counts.in_progress == 1
    assert summary.counts.done == 1
    assert summary.counts.total == 6


async def test_relevant_period_falls_through_week_then_month() -> None:
    week_only = [make_task(task_id="sun", due_date=date(2025, 1, 12))]
    summary = await _dashboard(week_only).get_dashboard("ext-caller", today=TODAY)
    assert summary.relevant_period == PERIOD_WEEK

    month_only = [make_task(task_id="late", due_date=date(2025, 1, 31))]
    summary = await _dashboard(month_only).get_dashboard("ext-caller", today=TODAY)
    assert summary.relevant_period == PERIOD_MONTH


async def test_lists_are_capped_at_top_n() -> None:
    tasks = [make_task(task_id=f"t{i}", due_date=TODAY) for i in range(TOP_N + 3)]
    summary = await _dashboard(tasks).get_dashboard("ext-caller", today=TODAY)
    assert len(summary.tasks_due_today) == TOP_N
    assert summary.counts.pending == TOP_N + 3


@pytest.mark.parametrize("assigned", [True, False])
async def test_dashboard_includes_assigned_and_created_tasks(assigned: bool) -> None:
    task = (
        make_task(task_id="x", created_by="u9", assigned_to=CALLER.id, due_date=TODAY)
        if assigned
        else make_task(task_id="x", created_by=CALLER.id, due_date=TODAY)
    )
    summary = await _dashboard([task]).get_dashboard("ext-caller", today=TODAY)
    assert [t.id for t in summary.tasks_due_today] == ["x"]
