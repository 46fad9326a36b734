"""User repository. Interface methods return application DTOs."""

from __future__ import annotations

import logging

from sqlalchemy import or_, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.dtos.common import PagedResult, normalize_page, normalize_page_size
from app.application.dtos.user import UserCreate, UserResult, UserSummary
from app.domain.identity import is_empty_external_id
from app.infrastructure.persistence.models.user import User
from app.infrastructure.persistence.repositories.base import BaseRepository
from app.shared.utils.datetime import ensure_utc, utc_now

logger = logging.getLogger(__name__)


def _to_result(u: User) -> UserResult:
    """Map ORM User to application UserResult."""
    return UserResult(
        id=u.id,
        external_id=u.external_id,
        name=u.name,
        email=u.email,
        created_at=ensure_utc(u.created_at),
        last_login_at=ensure_utc(u.last_login_at),
    )


def to_summary(u: User) -> UserSummary:
    """Map ORM User to the compact summary embedded in other results."""
    return UserSummary(id=u.id, external_id=u.external_id, name=u.name, email=u.email)


class UserRepository(BaseRepository[User]):
    """User repository. Implements IUserRepository."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, User)

    async def _get_model_by_external_id(self, external_id: str) -> User | None:
        result = await self.db.execute(
            select(User).where(User.external_id == external_id)
        )
        return result.scalar_one_or_none()

    async def get_by_id(self, user_id: str) -> UserResult | None:
        user = await self._get(user_id)
        return _to_result(user) if user else None

    async def get_by_external_id(self, external_id: str) -> UserResult | None:
        if is_empty_external_id(external_id):
            return None
        user = await self._get_model_by_external_id(external_id)
        return _to_result(user) if user else None

    async def add(self, data: UserCreate) -> tuple[UserResult, bool]:
        """Insert a user inside a SAVEPOINT.

        A concurrent request may insert the same external_id first; the unique
        violation then rolls back only the savepoint and the existing row is
        returned with created=False.
        """
        user = User(
            external_id=data.external_id,
            name=data.name,
            email=data.email,
            last_login_at=data.last_login_at,
        )
        try:
            async with self.db.begin_nested():
                self.db.add(user)
                await self.db.flush()
        except IntegrityError:
            existing = await self._get_model_by_external_id(data.external_id)
            if existing is None:
                raise
            logger.info(
                "User %s was provisioned concurrently; returning existing row",
                data.external_id,
            )
            return _to_result(existing), False
        await self.db.refresh(user)
        return _to_result(user), True

    async def update_name(self, user_id: str, name: str) -> UserResult | None:
        user = await self._get(user_id)
        if user is None:
            return None
        user.name = name
        await self.db.flush()
        return _to_result(user)

    async def touch_last_login(self, user_id: str) -> None:
        await self.db.execute(
            update(User).where(User.id == user_id).values(last_login_at=utc_now())
        )

    async def query(
        self, search: str | None, page: int, page_size: int
    ) -> PagedResult[UserSummary]:
        page = normalize_page(page)
        page_size = normalize_page_size(page_size)
        stmt = select(User)
        term = (search or "").strip()
        if term:
            stmt = stmt.where(
                or_(
                    User.name.icontains(term, autoescape=True),
                    User.email.icontains(term, autoescape=True),
                )
            )
        stmt = stmt.order_by(User.name.asc(), User.id.asc())
        rows, total = await self._page(stmt, page, page_size)
        return PagedResult(
            items=[to_summary(u) for u in rows],
            total_count=total,
            page=page,
            page_size=page_size,
        )
