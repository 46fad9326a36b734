"""SQLAlchemy mixins for common model patterns (DRY).

Provides: CuidMixin (string primary key) and CreatedAtMixin (timezone-aware
creation timestamp stamped by the application, with a server default for
rows inserted outside the ORM).
"""

from datetime import datetime

from sqlalchemy import DateTime, String
from sqlalchemy.orm import Mapped, declared_attr, mapped_column
from sqlalchemy.sql import func

from app.shared.utils.datetime import utc_now
from app.shared.utils.generators import generate_cuid


class CuidMixin:
    """Mixin for models using CUID as primary key. Provides id with default generate_cuid."""

    @declared_attr
    def id(cls) -> Mapped[str]:
        return mapped_column(String, primary_key=True, default=generate_cuid)


class CreatedAtMixin:
    """Mixin for created_at (application default utc_now, server default now())."""

    @declared_attr
    def created_at(cls) -> Mapped[datetime]:
        return mapped_column(
            DateTime(timezone=True),
            default=utc_now,
            server_default=func.now(),
            nullable=False,
        )
