"""Task application service: caller resolution, ownership checks and scoped views.

Every detail read and mutation goes through the same rule: the caller must be
the task's creator or its assignee. A missing task is reported before the
ownership check.
"""

from __future__ import annotations

from datetime import date

from app.application.dtos.common import PagedResult
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
from app.application.dtos.user import UserResult
from app.application.interfaces.repositories import ITaskRepository
from app.application.services.notification_service import NotificationService
from app.application.services.user_service import UserService
from app.domain.enums import TaskScope, TaskStatus
from app.domain.exceptions import (
    AuthorizationException,
    ResourceNotFoundException,
    ValidationException,
)
from app.shared.telemetry.logging import get_logger
from app.shared.utils.datetime import utc_now, utc_today

logger = get_logger(__name__)


def is_owner_or_assignee(task: TaskRecord, user_id: str) -> bool:
    return task.created_by_user_id == user_id or task.assigned_to_user_id == user_id


def is_overdue(due_date: date | None, today: date) -> bool:
    """Overdue means due strictly before today; status is not considered."""
    return due_date is not None and due_date < today


def to_list_item(task: TaskRecord, today: date) -> TaskListItem:
    return TaskListItem(
        id=task.id,
        title=task.title,
        status=task.status,
        due_date=task.due_date,
        is_overdue=is_overdue(task.due_date, today),
        assigned_to=task.assignee,
        created_by=task.creator,
    )


def to_detail(task: TaskRecord, today: date) -> TaskDetail:
    return TaskDetail(
        id=task.id,
        title=task.title,
        status=task.status,
        due_date=task.due_date,
        is_overdue=is_overdue(task.due_date, today),
        assigned_to=task.assignee,
        created_by=task.creator,
        description=task.description,
        created_at=task.created_at,
        updated_at=task.updated_at,
    )


def _in_scope(task: TaskRecord, user_id: str, scope: TaskScope) -> bool:
    if scope is TaskScope.CREATED:
        return task.created_by_user_id == user_id
    if scope is TaskScope.ASSIGNED:
        return task.assigned_to_user_id == user_id
    return True


def _clean_title(title: str) -> str:
    cleaned = (title or "").strip()
    if not cleaned:
        raise ValidationException("Title is required", field="title")
    return cleaned


def _clean_description(description: str | None) -> str | None:
    if description is None:
        return None
    return description.strip() or None


class TaskService:
    """Task use cases on behalf of an externally authenticated caller."""

    def __init__(
        self,
        task_repo: ITaskRepository,
        user_service: UserService,
        notification_service: NotificationService | None = None,
    ) -> None:
        self._task_repo = task_repo
        self._users = user_service
        self._notifications = notification_service

    async def _load_for(self, task_id: str, user: UserResult) -> TaskRecord:
        """Fetch then authorize: NotFound first, then creator-or-assignee."""
        task = await self._task_repo.get_by_id(task_id)
        if task is None:
            raise ResourceNotFoundException("task", task_id)
        if not is_owner_or_assignee(task, user.id):
            raise AuthorizationException("task", task_id)
        return task

    async def _resolve_assignee(self, external_id: str | None) -> str | None:
        if not external_id or not external_id.strip():
            return None
        summary = await self._users.get_user_summary(external_id.strip())
        if summary is None:
            raise ValidationException(
                "Assigned user not found.", field="assignedToExternalId"
            )
        return summary.id

    async def _notify_assignment(self, task: TaskRecord, caller: UserResult) -> None:
        if self._notifications is None or not task.assigned_to_user_id:
            return
        if task.assigned_to_user_id == caller.id:
            return
        await self._notifications.create_for_task_assignment(task)

    async def _notify_status_change(self, task: TaskRecord, caller: UserResult) -> None:
        if self._notifications is None or task.created_by_user_id == caller.id:
            return
        await self._notifications.create_for_status_change(task, task.created_by_user_id)

    async def get_tasks(
        self,
        external_id: str,
        filters: TaskFilters | None = None,
        page: int = 1,
        page_size: int = 20,
        scope: TaskScope | str | None = TaskScope.ASSIGNED,
    ) -> PagedResult[TaskListItem]:
        """Caller's tasks narrowed to the scope.

        The page is fetched for creator-or-assignee and then filtered in memory.
        total_count is the creator-only count for CREATED and the combined
        count otherwise.
        """
        if not isinstance(scope, TaskScope):
            scope = TaskScope.parse(scope)
        filters = filters or TaskFilters()
        user = await self._users.get_current_user(external_id)
        paged = await self._task_repo.get_tasks_for_user(user.id, filters, page, page_size)
        if scope is TaskScope.CREATED:
            total = await self._task_repo.get_task_count(user.id, filters, created_only=True)
        else:
            total = paged.total_count
        today = utc_today()
        return PagedResult(
            items=[to_list_item(t, today) for t in paged.items if _in_scope(t, user.id, scope)],
            total_count=total,
            page=paged.page,
            page_size=paged.page_size,
        )

    async def get_by_id(self, external_id: str, task_id: str) -> TaskDetail:
        user = await self._users.get_current_user(external_id)
        task = await self._load_for(task_id, user)
        return to_detail(task, utc_today())

    async def create(self, external_id: str, command: CreateTaskCommand) -> TaskDetail:
        """Create a task owned by the caller. Status always starts as Pending."""
        user = await self._users.get_current_user(external_id)
        assignee_id = await self._resolve_assignee(command.assigned_to_external_id)
        task = await self._task_repo.create(
            TaskCreate(
                title=_clean_title(command.title),
                description=_clean_description(command.description),
                due_date=command.due_date,
                created_by_user_id=user.id,
                assigned_to_user_id=assignee_id,
                status=TaskStatus.PENDING,
                created_at=utc_now(),
            )
        )
        logger.info("Task %s created by user %s", task.id, user.id)
        await self._notify_assignment(task, user)
        return to_detail(task, utc_today())

    async def update(
        self, external_id: str, task_id: str, command: UpdateTaskCommand
    ) -> TaskDetail:
        """Overwrite title, description, due date and status.

        The assignee is re-resolved when given and cleared when absent.
        """
        user = await self._users.get_current_user(external_id)
        current = await self._load_for(task_id, user)
        title = _clean_title(command.title)
        assignee_id = await self._resolve_assignee(command.assigned_to_external_id)
        task = await self._task_repo.update(
            TaskUpdate(
                id=current.id,
                title=title,
                description=_clean_description(command.description),
                status=command.status,
                due_date=command.due_date,
                assigned_to_user_id=assignee_id,
                updated_at=utc_now(),
            )
        )
        if assignee_id and assignee_id != current.assigned_to_user_id:
            await self._notify_assignment(task, user)
        if task.status != current.status:
            await self._notify_status_change(task, user)
        return to_detail(task, utc_today())

    async def update_status(
        self, external_id: str, task_id: str, status: TaskStatus
    ) -> TaskDetail:
        user = await self._users.get_current_user(external_id)
        current = await self._load_for(task_id, user)
        task = await self._task_repo.update(
            TaskUpdate(
                id=current.id,
                title=current.title,
                description=current.description,
                status=status,
                due_date=current.due_date,
                assigned_to_user_id=current.assigned_to_user_id,
                updated_at=utc_now(),
            )
        )
        if task.status != current.status:
            await self._notify_status_change(task, user)
        return to_detail(task, utc_today())

    async def delete(self, external_id: str, task_id: str) -> bool:
        user = await self._users.get_current_user(external_id)
        task = await self._load_for(task_id, user)
        deleted = await self._task_repo.delete(task.id)
        if deleted:
            logger.info("Task %s deleted by user %s", task.id, user.id)
        return deleted
