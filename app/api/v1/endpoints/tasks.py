"""Task API: thin routes delegating to TaskService."""

from datetime import date
from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request, Response

from app.api.v1.dependencies import CurrentExternalId, get_task_service
from app.application.dtos.task import CreateTaskCommand, TaskFilters, UpdateTaskCommand
from app.application.services import TaskService
from app.core.limiter import limit_writes
from app.domain.enums import TaskScope, TaskStatus
from app.domain.exceptions import ResourceNotFoundException
from app.schemas.common import PagedResponse
from app.schemas.task import (
    TaskCreateRequest,
    TaskDetailResponse,
    TaskListItemResponse,
    TaskStatusUpdateRequest,
    TaskUpdateRequest,
)

router = APIRouter()


def _parse_status(value: str | None) -> TaskStatus | None:
    """Unknown status values are ignored rather than rejected."""
    if not value:
        return None
    for status in TaskStatus:
        if status.value.lower() == value.strip().lower():
            return status
    return None


@router.get("", response_model=PagedResponse[TaskListItemResponse])
async def list_tasks(
    external_id: CurrentExternalId,
    task_svc: Annotated[TaskService, Depends(get_task_service)],
    search: str | None = None,
    status: str | None = None,
    due_date_from: Annotated[date | None, Query(alias="dueDateFrom")] = None,
    due_date_to: Annotated[date | None, Query(alias="dueDateTo")] = None,
    scope: str = TaskScope.ASSIGNED.value,
    page: int = 1,
    page_size: Annotated[int, Query(alias="pageSize")] = 20,
):
    """Caller's tasks (creator or assignee) filtered, paged and narrowed by scope."""
    filters = TaskFilters(
        search=search,
        status=_parse_status(status),
        due_date_from=due_date_from,
        due_date_to=due_date_to,
    )
    result = await task_svc.get_tasks(
        external_id, filters, page=page, page_size=page_size, scope=scope
    )
    return PagedResponse[TaskListItemResponse].model_validate(result)


@router.get("/{task_id}", response_model=TaskDetailResponse)
async def get_task(
    task_id: str,
    external_id: CurrentExternalId,
    task_svc: Annotated[TaskService, Depends(get_task_service)],
):
    """Task detail; 404 when missing, 401 when the caller is neither creator nor assignee."""
    detail = await task_svc.get_by_id(external_id, task_id)
    return TaskDetailResponse.model_validate(detail)


@router.post("", response_model=TaskDetailResponse, status_code=201)
@limit_writes
async def create_task(
    request: Request,
    response: Response,
    body: TaskCreateRequest,
    external_id: CurrentExternalId,
    task_svc: Annotated[TaskService, Depends(get_task_service)],
):
    """Create a task owned by the caller. New tasks always start Pending."""
    detail = await task_svc.create(
        external_id,
        CreateTaskCommand(
            title=body.title,
            description=body.description,
            due_date=body.due_date,
            assigned_to_external_id=body.assigned_to_external_id,
        ),
    )
    response.headers["Location"] = f"{request.url.path.rstrip('/')}/{detail.id}"
    return TaskDetailResponse.model_validate(detail)


@router.put("/{task_id}", response_model=TaskDetailResponse)
@limit_writes
async def update_task(
    request: Request,
    task_id: str,
    body: TaskUpdateRequest,
    external_id: CurrentExternalId,
    task_svc: Annotated[TaskService, Depends(get_task_service)],
):
    """Full update. Omitting assignedToExternalId unassigns the task."""
    detail = await task_svc.update(
        external_id,
        task_id,
        UpdateTaskCommand(
            title=body.title,
            description=body.description,
            due_date=body.due_date,
            status=body.status,
            assigned_to_external_id=body.assigned_to_external_id,
        ),
    )
    return TaskDetailResponse.model_validate(detail)


@router.patch("/{task_id}/status", response_model=TaskDetailResponse)
@limit_writes
async def update_task_status(
    request: Request,
    task_id: str,
    body: TaskStatusUpdateRequest,
    external_id: CurrentExternalId,
    task_svc: Annotated[TaskService, Depends(get_task_service)],
):
    """Change only the status (creator or assignee)."""
    detail = await task_svc.update_status(external_id, task_id, body.status)
    return TaskDetailResponse.model_validate(detail)


@router.delete("/{task_id}", status_code=204)
@limit_writes
async def delete_task(
    request: Request,
    task_id: str,
    external_id: CurrentExternalId,
    task_svc: Annotated[TaskService, Depends(get_task_service)],
) -> Response:
    """Delete a task; 404 when nothing was removed."""
    if not await task_svc.delete(external_id, task_id):
        raise ResourceNotFoundException("task", task_id)
    return Response(status_code=204)
