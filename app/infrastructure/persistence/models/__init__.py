"""Persistence models: ORM entities and mixins."""

from app.infrastructure.persistence.models.mixins import CreatedAtMixin, CuidMixin
from app.infrastructure.persistence.models.notification import Notification
from app.infrastructure.persistence.models.task import Task
from app.infrastructure.persistence.models.user import User

__all__ = [
    "CreatedAtMixin",
    "CuidMixin",
    "Notification",
    "Task",
    "User",
]
