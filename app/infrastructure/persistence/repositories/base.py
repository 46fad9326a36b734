"""Base repository: generic lookup, insert, delete and paging helpers."""

from typing import Any

from sqlalchemy import Select, delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm.interfaces import ORMOption

from app.infrastructure.persistence.database import Base


class BaseRepository[ModelType: Base]:
    """Base repository with get, add, delete_by_id and paged queries.

    Public methods of subclasses return application DTOs; these helpers work
    on ORM instances and are meant for subclasses only.
    """

    def __init__(self, db: AsyncSession, model: type[ModelType]) -> None:
        self.db = db
        self.model = model

    async def _get(
        self, entity_id: str, *options: ORMOption, refresh: bool = False
    ) -> ModelType | None:
        """Return a single record by primary key, or None.

        refresh=True overwrites an instance already held by the session
        (needed after bulk UPDATE statements).
        """
        model: Any = self.model
        stmt = select(self.model).where(model.id == entity_id).options(*options)
        if refresh:
            stmt = stmt.execution_options(populate_existing=True)
        result = await self.db.execute(stmt)
        return result.scalar_one_or_none()

    async def _add(self, obj: ModelType) -> ModelType:
        """Persist a new record and load server-side defaults."""
        self.db.add(obj)
        await self.db.flush()
        await self.db.refresh(obj)
        return obj

    async def delete_by_id(self, entity_id: str) -> bool:
        """Delete by primary key. Returns False when no row matched."""
        model: Any = self.model
        result = await self.db.execute(delete(self.model).where(model.id == entity_id))
        return (result.rowcount or 0) > 0

    async def _count(self, stmt: Select[Any]) -> int:
        """Count rows of a select (ordering and paging are ignored)."""
        count_stmt = select(func.count()).select_from(
            stmt.order_by(None).limit(None).offset(None).subquery()
        )
        result = await self.db.execute(count_stmt)
        return int(result.scalar_one())

    async def _page(
        self, stmt: Select[Any], page: int, page_size: int
    ) -> tuple[list[ModelType], int]:
        """Return (rows for the 1-based page, total matching rows)."""
        total = await self._count(stmt)
        result = await self.db.execute(
            stmt.offset((page - 1) * page_size).limit(page_size)
        )
        return list(result.scalars().all()), total
