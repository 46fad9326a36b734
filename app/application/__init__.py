"""Application layer: DTOs, interfaces and services.

Depends only on domain and protocol definitions (DIP).
Infrastructure implements the interfaces (repositories, directory, publisher).
"""

from app.application.interfaces import (
    INotificationPublisher,
    INotificationRepository,
    ITaskRepository,
    IUserDirectory,
    IUserRepository,
)
from app.application.services import (
    DashboardService,
    NotificationFactory,
    NotificationService,
    TaskService,
    UserService,
)

__all__ = [
    "DashboardService",
    "INotificationPublisher",
    "INotificationRepository",
    "ITaskRepository",
    "IUserDirectory",
    "IUserRepository",
    "NotificationFactory",
    "NotificationService",
    "TaskService",
    "UserService",
]
