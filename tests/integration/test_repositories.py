"""Repository integration tests. Require Postgres; the session is rolled back after each test."""

from datetime import date

import pytest

from app.application.dtos.notification import NotificationCreate
from app.application.dtos.task import TaskCreate, TaskFilters, TaskUpdate
from app.application.dtos.user import UserCreate
from app.domain.enums import TaskStatus
from app.domain.exceptions import ConflictException
from app.infrastructure.persistence.repositories import (
    NotificationRepository,
    TaskRepository,
    UserRepository,
)
from app.shared.utils.datetime import utc_now


async def _user(db_session, external_id: str, name: str):
    user, created = await UserRepository(db_session).add(
        UserCreate(external_id=external_id, name=name, email=f"{external_id}@example.com")
    )
    assert created
    return user


@pytest.mark.requires_db
async def test_add_user_twice_returns_existing(db_session) -> None:
    repo = UserRepository(db_session)
    first = await _user(db_session, "ext-dup", "Dup")
    again, created = await repo.add(UserCreate(external_id="ext-dup", name="Other", email="x@y"))
    assert created is False
    assert again.id == first.id
    assert again.name == "Dup"


@pytest.mark.requires_db
async def test_user_search_escapes_wildcards_and_orders_by_name(db_session) -> None:
    await _user(db_session, "ext-b", "Bravo 100%")
    await _user(db_session, "ext-a", "Alpha 100")
    repo = UserRepository(db_session)
    page = await repo.query("100%", 1, 20)
    assert [u.external_id for u in page.items] == ["ext-b"]
    everyone = await repo.query(None, 1, 20)
    names = [u.name for u in everyone.items]
    assert names == sorted(names)


@pytest.mark.requires_db
async def test_tasks_are_scoped_to_creator_or_assignee(db_session) -> None:
    alice = await _user(db_session, "ext-alice", "Alice")
    bob = await _user(db_session, "ext-bob", "Bob")
    carol = await _user(db_session, "ext-carol", "Carol")
    repo = TaskRepository(db_session)
    await repo.create(TaskCreate(title="A owns", created_by_user_id=alice.id))
    await repo.create(
        TaskCreate(title="B for A", created_by_user_id=bob.id, assigned_to_user_id=alice.id)
    )
    await repo.create(TaskCreate(title="C only", created_by_user_id=carol.id))

    page = await repo.get_tasks_for_user(alice.id, TaskFilters(), 1, 20)
    assert {t.title for t in page.items} == {"A owns", "B for A"}
    assert page.total_count == 2
    assert await repo.get_task_count(alice.id, TaskFilters(), created_only=True) == 1
    assigned = next(t for t in page.items if t.title == "B for A")
    assert assigned.assignee is not None
    assert assigned.assignee.external_id == "ext-alice"
    assert assigned.creator is not None
    assert assigned.creator.external_id == "ext-bob"


@pytest.mark.requires_db
async def test_task_filters(db_session) -> None:
    alice = await _user(db_session, "ext-f", "F")
    repo = TaskRepository(db_session)
    await repo.create(
        TaskCreate(title="Report", created_by_user_id=alice.id, due_date=date(2025, 1, 10))
    )
    await repo.create(
        TaskCreate(
            title="Other",
            created_by_user_id=alice.id,
            due_date=date(2025, 2, 10),
            status=TaskStatus.DONE,
        )
    )
    by_search = await repo.get_tasks_for_user(alice.id, TaskFilters(search="REP"), 1, 20)
    assert [t.title for t in by_search.items] == ["Report"]
    by_status = await repo.get_tasks_for_user(
        alice.id, TaskFilters(status=TaskStatus.DONE), 1, 20
    )
    assert [t.title for t in by_status.items] == ["Other"]
    by_window = await repo.get_tasks_for_user(
        alice.id,
        TaskFilters(due_date_from=date(2025, 1, 1), due_date_to=date(2025, 1, 31)),
        1,
        20,
    )
    assert [t.title for t in by_window.items] == ["Report"]


@pytest.mark.requires_db
async def test_update_and_delete_task(db_session) -> None:
    alice = await _user(db_session, "ext-u", "U")
    repo = TaskRepository(db_session)
    task = await repo.create(TaskCreate(title="Draft", created_by_user_id=alice.id))
    updated = await repo.update(
        TaskUpdate(
            id=task.id,
            title="Final",
            description="done",
            status=TaskStatus.DONE,
            due_date=None,
            assigned_to_user_id=None,
            updated_at=utc_now(),
        )
    )
    assert updated.title == "Final"
    assert updated.status is TaskStatus.DONE
    assert updated.updated_at is not None
    assert await repo.delete(task.id) is True
    assert await repo.delete(task.id) is False
    with pytest.raises(ConflictException):
        await repo.update(
            TaskUpdate(
                id=task.id,
                title="Gone",
                description=None,
                status=TaskStatus.PENDING,
                due_date=None,
                assigned_to_user_id=None,
                updated_at=utc_now(),
            )
        )


@pytest.mark.requires_db
async def test_notifications_read_state(db_session) -> None:
    alice = await _user(db_session, "ext-n", "N")
    repo = NotificationRepository(db_session)
    first = await repo.add(NotificationCreate(recipient_user_id=alice.id, title="One"))
    await repo.add(NotificationCreate(recipient_user_id=alice.id, title="Two"))
    assert await repo.get_unread_count(alice.id) == 2
    assert await repo.mark_as_read(first.id) is True
    assert await repo.mark_as_read(first.id) is False
    assert await repo.get_unread_count(alice.id) == 1
    assert await repo.mark_all_as_read(alice.id) == 1
    assert await repo.get_unread_count(alice.id) == 0
    stored = await repo.get_by_id(first.id)
    assert stored is not None
    assert stored.is_read is True
    assert stored.read_at is not None
    page = await repo.get_by_recipient(alice.id, 1, 20)
    assert page.total_count == 2
