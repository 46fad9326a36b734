"""Task repository. Queries are always scoped to a creator or assignee.

Creator and assignee are loaded explicitly with selectinload; the ORM
relationships raise on lazy access.
"""

from __future__ import annotations

from typing import Any

from sqlalchemy import Select, or_, select, update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.application.dtos.common import PagedResult, normalize_page, normalize_page_size
from app.application.dtos.task import TaskCreate, TaskFilters, TaskRecord, TaskUpdate
from app.domain.exceptions import ConflictException
from app.infrastructure.persistence.models.task import Task
from app.infrastructure.persistence.repositories.base import BaseRepository
from app.infrastructure.persistence.repositories.user_repo import to_summary
from app.shared.utils.datetime import ensure_utc, utc_now

_WITH_PEOPLE = (selectinload(Task.creator), selectinload(Task.assignee))


def _to_record(t: Task) -> TaskRecord:
    """Map Task ORM (with creator/assignee loaded) to TaskRecord DTO."""
    return TaskRecord(
        id=t.id,
        title=t.title,
        description=t.description,
        status=t.status,
        due_date=t.due_date,
        created_by_user_id=t.created_by_user_id,
        assigned_to_user_id=t.assigned_to_user_id,
        created_at=ensure_utc(t.created_at),
        updated_at=ensure_utc(t.updated_at),
        creator=to_summary(t.creator) if t.creator is not None else None,
        assignee=to_summary(t.assignee) if t.assignee is not None else None,
    )


def _apply_filters(stmt: Select[Any], filters: TaskFilters) -> Select[Any]:
    term = (filters.search or "").strip()
    if term:
        stmt = stmt.where(
            or_(
                Task.title.icontains(term, autoescape=True),
                Task.description.icontains(term, autoescape=True),
            )
        )
    if filters.status is not None:
        stmt = stmt.where(Task.status == filters.status)
    if filters.due_date_from is not None:
        stmt = stmt.where(Task.due_date >= filters.due_date_from)
    if filters.due_date_to is not None:
        stmt = stmt.where(Task.due_date <= filters.due_date_to)
    return stmt


def _involving(user_id: str, *, created_only: bool = False) -> Any:
    if created_only:
        return Task.created_by_user_id == user_id
    return or_(Task.created_by_user_id == user_id, Task.assigned_to_user_id == user_id)


class TaskRepository(BaseRepository[Task]):
    """Task repository. Implements ITaskRepository."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, Task)

    async def get_tasks_for_user(
        self, user_id: str, filters: TaskFilters, page: int, page_size: int
    ) -> PagedResult[TaskRecord]:
        page = normalize_page(page)
        page_size = normalize_page_size(page_size)
        stmt = _apply_filters(select(Task).where(_involving(user_id)), filters)
        stmt = stmt.options(*_WITH_PEOPLE).order_by(
            Task.created_at.desc(), Task.id.desc()
        )
        rows, total = await self._page(stmt, page, page_size)
        return PagedResult(
            items=[_to_record(t) for t in rows],
            total_count=total,
            page=page,
            page_size=page_size,
        )

    async def get_task_count(
        self, user_id: str, filters: TaskFilters, *, created_only: bool = False
    ) -> int:
        stmt = _apply_filters(
            select(Task.id).where(_involving(user_id, created_only=created_only)),
            filters,
        )
        return await self._count(stmt)

    async def get_by_id(self, task_id: str) -> TaskRecord | None:
        task = await self._get(task_id, *_WITH_PEOPLE)
        return _to_record(task) if task else None

    async def create(self, data: TaskCreate) -> TaskRecord:
        """Insert a task. Unknown creator/assignee ids raise IntegrityError unchanged."""
        task = Task(
            title=data.title,
            description=data.description,
            status=data.status,
            due_date=data.due_date,
            created_by_user_id=data.created_by_user_id,
            assigned_to_user_id=data.assigned_to_user_id,
            created_at=data.created_at or utc_now(),
        )
        self.db.add(task)
        await self.db.flush()
        created = await self._get(task.id, *_WITH_PEOPLE, refresh=True)
        if created is None:
            raise ConflictException("Task disappeared after insert", {"task_id": task.id})
        return _to_record(created)

    async def update(self, data: TaskUpdate) -> TaskRecord:
        """Overwrite mutable fields in one UPDATE; the creator is never changed."""
        result = await self.db.execute(
            update(Task)
            .where(Task.id == data.id)
            .values(
                title=data.title,
                description=data.description,
                status=data.status,
                due_date=data.due_date,
                assigned_to_user_id=data.assigned_to_user_id,
                updated_at=data.updated_at,
            )
            .execution_options(synchronize_session=False)
        )
        if not result.rowcount:
            raise ConflictException(
                "Task was modified or deleted by another request",
                {"task_id": data.id},
            )
        updated = await self._get(data.id, *_WITH_PEOPLE, refresh=True)
        if updated is None:
            raise ConflictException(
                "Task was modified or deleted by another request",
                {"task_id": data.id},
            )
        return _to_record(updated)

    async def delete(self, task_id: str) -> bool:
        return await self.delete_by_id(task_id)
