"""Persistence repositories. Re-exports for dependency injection."""

from app.infrastructure.persistence.repositories.base import BaseRepository
from app.infrastructure.persistence.repositories.notification_repo import (
    NotificationRepository,
)
from app.infrastructure.persistence.repositories.task_repo import TaskRepository
from app.infrastructure.persistence.repositories.user_repo import UserRepository

__all__ = [
    "BaseRepository",
    "NotificationRepository",
    "TaskRepository",
    "UserRepository",
]
