"""DB session dependencies (composition root).

Reads that may provision the caller use the transactional session so the
new user row is committed with the request.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.infrastructure.persistence.database import get_db, get_db_transactional

ReadSession = Annotated[AsyncSession, Depends(get_db)]
WriteSession = Annotated[AsyncSession, Depends(get_db_transactional)]
