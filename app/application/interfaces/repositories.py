"""Repository interfaces (ports) for the application layer.

Protocols define contracts that infrastructure implementations must fulfill (DIP).
All types reference application DTOs only; no infrastructure imports.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from app.application.dtos.common import PagedResult
    from app.application.dtos.notification import NotificationCreate, NotificationResult
    from app.application.dtos.task import TaskCreate, TaskFilters, TaskRecord, TaskUpdate
    from app.application.dtos.user import UserCreate, UserResult, UserSummary


# User repository interface
class IUserRepository(Protocol):
    """Protocol for user repository (DIP)."""

    async def get_by_id(self, user_id: str) -> UserResult | None:
        """Return user by internal id."""

    async def get_by_external_id(self, external_id: str) -> UserResult | None:
        """Return user by identity-provider subject id."""

    async def add(self, data: UserCreate) -> tuple[UserResult, bool]:
        """Insert user; on a concurrent duplicate return the existing row. Second item is True when inserted."""

    async def update_name(self, user_id: str, name: str) -> UserResult | None:
        """Set display name; None if the user does not exist."""

    async def touch_last_login(self, user_id: str) -> None:
        """Stamp last_login_at with the current time."""

    async def query(
        self, search: str | None, page: int, page_size: int
    ) -> PagedResult[UserSummary]:
        """Case-insensitive search on name or email, ordered by name."""


# Task repository interface
class ITaskRepository(Protocol):
    """Protocol for task repository (DIP)."""

    async def get_tasks_for_user(
        self, user_id: str, filters: TaskFilters, page: int, page_size: int
    ) -> PagedResult[TaskRecord]:
        """Tasks where user is creator or assignee, newest first."""

    async def get_task_count(
        self, user_id: str, filters: TaskFilters, *, created_only: bool = False
    ) -> int:
        """Count with the same filters; created_only restricts to creator matches."""

    async def get_by_id(self, task_id: str) -> TaskRecord | None:
        """Return task with creator and assignee loaded."""

    async def create(self, data: TaskCreate) -> TaskRecord:
        """Insert task. Integrity errors propagate."""

    async def update(self, data: TaskUpdate) -> TaskRecord:
        """Overwrite mutable fields. Raises ConflictException if the row is gone."""

    async def delete(self, task_id: str) -> bool:
        """Delete task; False when nothing was removed."""


# Notification repository interface
class INotificationRepository(Protocol):
    """Protocol for notification repository (DIP)."""

    async def add(self, data: NotificationCreate) -> NotificationResult:
        """Insert notification."""

    async def get_by_id(self, notification_id: str) -> NotificationResult | None:
        """Return notification by id."""

    async def get_by_recipient(
        self, user_id: str, page: int, page_size: int
    ) -> PagedResult[NotificationResult]:
        """Recipient's notifications, newest first."""

    async def get_unread_count(self, user_id: str) -> int:
        """Number of unread notifications for recipient."""

    async def mark_as_read(self, notification_id: str) -> bool:
        """Mark one unread notification read; False when missing or already read."""

    async def mark_all_as_read(self, user_id: str) -> int:
        """Mark every unread notification of recipient read in one statement."""
