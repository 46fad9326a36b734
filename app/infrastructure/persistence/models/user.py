"""User ORM model. One row per identity-provider subject."""

from datetime import datetime

from sqlalchemy import DateTime, String
from sqlalchemy.orm import Mapped, mapped_column

from app.infrastructure.persistence.database import Base
from app.infrastructure.persistence.models.mixins import CreatedAtMixin, CuidMixin

USER_NAME_MAX_LENGTH = 100
USER_EMAIL_MAX_LENGTH = 256


class User(CuidMixin, CreatedAtMixin, Base):
    """User model. Table: app_user. external_id is unique."""

    __tablename__ = "app_user"

    external_id: Mapped[str] = mapped_column(
        String(64), nullable=False, unique=True, index=True
    )
    name: Mapped[str] = mapped_column(String(USER_NAME_MAX_LENGTH), nullable=False)
    email: Mapped[str] = mapped_column(String(USER_EMAIL_MAX_LENGTH), nullable=False)
    last_login_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True
    )
