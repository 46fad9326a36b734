"""Task endpoints with the service layer mocked."""

from dataclasses import replace
from datetime import date
from unittest.mock import AsyncMock

import pytest
from httpx import AsyncClient

from app.api.v1.dependencies import get_task_service
from app.application.dtos.common import PagedResult
from app.application.services.task_service import to_detail, to_list_item
from app.domain.enums import TaskScope, TaskStatus
from app.domain.exceptions import (
    AuthorizationException,
    ResourceNotFoundException,
    ValidationException,
)
from app.main import app
from tests.factories import make_task, make_user, summary_of

TODAY = date(2025, 1, 15)


@pytest.fixture
def task_svc(authenticated) -> AsyncMock:
    svc = AsyncMock()
    app.dependency_overrides[get_task_service] = lambda: svc
    return svc


def _detail(**kwargs):
    task = make_task(**kwargs)
    creator = summary_of(make_user())
    return to_detail(replace(task, creator=creator), TODAY)


async def test_list_tasks_parses_filters_and_returns_camel_case(
    client: AsyncClient, task_svc: AsyncMock
) -> None:
    item = to_list_item(make_task(due_date=date(2025, 1, 10)), TODAY)
    task_svc.get_tasks.return_value = PagedResult(items=[item], total_count=1, page=1, page_size=10)
    response = await client.get(
        "/api/v1/tasks",
        params={
            "search": "rep",
            "status": "done",
            "dueDateFrom": "2025-01-01",
            "dueDateTo": "2025-01-31",
            "scope": "created",
            "pageSize": 10,
        },
    )
    assert response.status_code == 200
    body = response.json()
    assert body["totalCount"] == 1
    assert body["pageSize"] == 10
    assert body["items"][0]["isOverdue"] is True
    assert body["items"][0]["dueDate"] == "2025-01-10"

    external_id, filters = task_svc.get_tasks.await_args.args
    kwargs = task_svc.get_tasks.await_args.kwargs
    assert external_id == "ext-caller"
    assert filters.search == "rep"
    assert filters.status is TaskStatus.DONE
    assert filters.due_date_from == date(2025, 1, 1)
    assert kwargs["scope"] == "created"
    assert kwargs["page_size"] == 10


async def test_list_tasks_ignores_unknown_status_and_defaults_scope(
    client: AsyncClient, task_svc: AsyncMock
) -> None:
    task_svc.get_tasks.return_value = PagedResult()
    response = await client.get("/api/v1/tasks", params={"status": "Archived"})
    assert response.status_code == 200
    filters = task_svc.get_tasks.await_args.args[1]
    assert filters.status is None
    assert task_svc.get_tasks.await_args.kwargs["scope"] == TaskScope.ASSIGNED.value


async def test_create_task_returns_201_with_location(
    client: AsyncClient, task_svc: AsyncMock
) -> None:
    task_svc.create.return_value = _detail(task_id="t9", title="Plan")
    response = await client.post(
        "/api/v1/tasks",
        json={"title": "Plan", "dueDate": "2025-02-01", "assignedToExternalId": "ext-2"},
    )
    assert response.status_code == 201
    assert response.headers["Location"] == "/api/v1/tasks/t9"
    body = response.json()
    assert body["status"] == "Pending"
    assert body["createdBy"]["externalId"] == "ext-caller"
    command = task_svc.create.await_args.args[1]
    assert command.assigned_to_external_id == "ext-2"
    assert command.due_date == date(2025, 2, 1)


@pytest.mark.parametrize("payload", [{}, {"title": ""}, {"title": "x" * 101}])
async def test_create_task_invalid_body_is_400(
    client: AsyncClient, task_svc: AsyncMock, payload: dict
) -> None:
    response = await client.post("/api/v1/tasks", json=payload)
    assert response.status_code == 400
    assert response.json()["code"] == "VALIDATION_ERROR"
    task_svc.create.assert_not_awaited()


async def test_create_task_unknown_assignee_is_400(client: AsyncClient, task_svc: AsyncMock) -> None:
    task_svc.create.side_effect = ValidationException(
        "Assigned user not found.", field="assignedToExternalId"
    )
    response = await client.post(
        "/api/v1/tasks", json={"title": "Plan", "assignedToExternalId": "ghost"}
    )
    assert response.status_code == 400
    assert response.json()["error"] == "Assigned user not found."


async def test_get_task_not_owner_is_401(client: AsyncClient, task_svc: AsyncMock) -> None:
    task_svc.get_by_id.side_effect = AuthorizationException("task", "t1")
    response = await client.get("/api/v1/tasks/t1")
    assert response.status_code == 401
    assert response.json()["code"] == "AUTHORIZATION_ERROR"


async def test_get_task_missing_is_404(client: AsyncClient, task_svc: AsyncMock) -> None:
    task_svc.get_by_id.side_effect = ResourceNotFoundException("task", "t1")
    response = await client.get("/api/v1/tasks/t1")
    assert response.status_code == 404


async def test_update_task_accepts_item_status_alias(client: AsyncClient, task_svc: AsyncMock) -> None:
    task_svc.update.return_value = _detail(status=TaskStatus.DONE)
    response = await client.put(
        "/api/v1/tasks/t1", json={"title": "Plan", "itemStatus": "Done"}
    )
    assert response.status_code == 200
    assert response.json()["status"] == "Done"
    command = task_svc.update.await_args.args[2]
    assert command.status is TaskStatus.DONE
    assert command.assigned_to_external_id is None


async def test_update_task_rejects_unknown_status(client: AsyncClient, task_svc: AsyncMock) -> None:
    response = await client.put("/api/v1/tasks/t1", json={"title": "Plan", "status": "Archived"})
    assert response.status_code == 400


async def test_patch_status(client: AsyncClient, task_svc: AsyncMock) -> None:
    task_svc.update_status.return_value = _detail(status=TaskStatus.IN_PROGRESS)
    response = await client.patch("/api/v1/tasks/t1/status", json={"status": "InProgress"})
    assert response.status_code == 200
    task_svc.update_status.assert_awaited_once_with("ext-caller", "t1", TaskStatus.IN_PROGRESS)


async def test_delete_task(client: AsyncClient, task_svc: AsyncMock) -> None:
    task_svc.delete.return_value = True
    response = await client.delete("/api/v1/tasks/t1")
    assert response.status_code == 204
    assert response.content == b""


async def test_delete_task_nothing_removed_is_404(client: AsyncClient, task_svc: AsyncMock) -> None:
    task_svc.delete.return_value = False
    response = await client.delete("/api/v1/tasks/t1")
    assert response.status_code == 404
