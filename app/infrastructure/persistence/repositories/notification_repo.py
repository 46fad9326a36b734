"""Notification repository. Interface methods return application DTOs."""

from __future__ import annotations

from sqlalchemy import func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.dtos.common import PagedResult, normalize_page, normalize_page_size
from app.application.dtos.notification import NotificationCreate, NotificationResult
from app.infrastructure.persistence.models.notification import Notification
from app.infrastructure.persistence.repositories.base import BaseRepository
from app.shared.utils.datetime import ensure_utc, utc_now


def _to_result(n: Notification) -> NotificationResult:
    return NotificationResult(
        id=n.id,
        recipient_user_id=n.recipient_user_id,
        related_task_id=n.related_task_id,
        title=n.title,
        message=n.message,
        type=n.type,
        is_read=n.is_read,
        created_at=ensure_utc(n.created_at),
        read_at=ensure_utc(n.read_at),
    )


class NotificationRepository(BaseRepository[Notification]):
    """Notification repository. Implements INotificationRepository."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, Notification)

    async def add(self, data: NotificationCreate) -> NotificationResult:
        notification = Notification(
            recipient_user_id=data.recipient_user_id,
            related_task_id=data.related_task_id,
            title=data.title,
            message=data.message,
            type=data.type,
            is_read=False,
            created_at=utc_now(),
        )
        return _to_result(await self._add(notification))

    async def get_by_id(self, notification_id: str) -> NotificationResult | None:
        notification = await self._get(notification_id, refresh=True)
        return _to_result(notification) if notification else None

    async def get_by_recipient(
        self, user_id: str, page: int, page_size: int
    ) -> PagedResult[NotificationResult]:
        page = normalize_page(page)
        page_size = normalize_page_size(page_size)
        stmt = (
            select(Notification)
            .where(Notification.recipient_user_id == user_id)
            .order_by(Notification.created_at.desc(), Notification.id.desc())
        )
        rows, total = await self._page(stmt, page, page_size)
        return PagedResult(
            items=[_to_result(n) for n in rows],
            total_count=total,
            page=page,
            page_size=page_size,
        )

    async def get_unread_count(self, user_id: str) -> int:
        result = await self.db.execute(
            select(func.count(Notification.id)).where(
                Notification.recipient_user_id == user_id,
                Notification.is_read.is_(False),
            )
        )
        return int(result.scalar_one())

    async def mark_as_read(self, notification_id: str) -> bool:
        result = await self.db.execute(
            update(Notification)
            .where(Notification.id == notification_id, Notification.is_read.is_(False))
            .values(is_read=True, read_at=utc_now())
            .execution_options(synchronize_session=False)
        )
        return (result.rowcount or 0) > 0

    async def mark_all_as_read(self, user_id: str) -> int:
        """One UPDATE for all unread rows of the recipient."""
        result = await self.db.execute(
            update(Notification)
            .where(
                Notification.recipient_user_id == user_id,
                Notification.is_read.is_(False),
            )
            .values(is_read=True, read_at=utc_now())
            .execution_options(synchronize_session=False)
        )
        return result.rowcount or 0
