"""Notification application service: create, list and mark read."""

from __future__ import annotations

from app.application.dtos.common import PagedResult
from app.application.dtos.notification import (
    CreateNotificationCommand,
    NotificationCreate,
    NotificationResult,
)
from app.application.dtos.task import TaskRecord
from app.application.interfaces.repositories import INotificationRepository
from app.application.interfaces.services import INotificationPublisher
from app.application.services.notification_factory import NotificationFactory
from app.application.services.user_service import UserService
from app.domain.exceptions import ResourceNotFoundException, ValidationException
from app.shared.telemetry.logging import get_logger

logger = get_logger(__name__)


class NotificationService:
    """Stores per-user notifications and hands new ones to the publisher."""

    def __init__(
        self,
        notification_repo: INotificationRepository,
        user_service: UserService,
        publisher: INotificationPublisher,
        factory: NotificationFactory | None = None,
    ) -> None:
        self._repo = notification_repo
        self._users = user_service
        self._publisher = publisher
        self._factory = factory or NotificationFactory()

    async def _store(self, data: NotificationCreate) -> NotificationResult:
        saved = await self._repo.add(data)
        await self._publisher.publish(saved)
        return saved

    async def create(self, command: CreateNotificationCommand) -> NotificationResult:
        """Resolve the recipient (external id, then internal id), persist and publish."""
        title = (command.title or "").strip()
        if not title:
            raise ValidationException("Title is required", field="title")
        recipient = await self._users.find_user(command.recipient)
        if recipient is None:
            raise ResourceNotFoundException("user", command.recipient)
        return await self._store(
            NotificationCreate(
                recipient_user_id=recipient.id,
                title=title,
                message=command.message,
                type=command.type,
                related_task_id=command.related_task_id,
            )
        )

    async def create_for_task_assignment(self, task: TaskRecord) -> NotificationResult:
        return await self._store(self._factory.task_assigned(task))

    async def create_for_status_change(
        self, task: TaskRecord, recipient_user_id: str
    ) -> NotificationResult:
        return await self._store(self._factory.task_status_changed(task, recipient_user_id))

    async def get_by_user(
        self, external_id: str, page: int = 1, page_size: int = 20
    ) -> PagedResult[NotificationResult]:
        """Caller's notifications, newest first."""
        user = await self._users.get_current_user(external_id)
        return await self._repo.get_by_recipient(user.id, page, page_size)

    async def get_unread_count(self, external_id: str) -> int:
        user = await self._users.get_current_user(external_id)
        return await self._repo.get_unread_count(user.id)

    async def mark_as_read(self, notification_id: str, external_id: str | None = None) -> None:
        """No-op when missing, already read, or (with external_id) not the caller's."""
        if external_id is not None:
            user = await self._users.get_current_user(external_id)
            existing = await self._repo.get_by_id(notification_id)
            if existing is None or existing.recipient_user_id != user.id:
                return
        if not await self._repo.mark_as_read(notification_id):
            logger.debug("Notification %s already read or missing", notification_id)

    async def mark_all_as_read(self, external_id: str) -> int:
        user = await self._users.get_current_user(external_id)
        count = await self._repo.mark_all_as_read(user.id)
        logger.info("Marked %d notifications read for user %s", count, user.id)
        return count
