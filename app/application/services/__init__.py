"""Application services: users, tasks, notifications and the dashboard."""

from app.application.services.dashboard_service import DashboardService
from app.application.services.notification_factory import NotificationFactory
from app.application.services.notification_service import NotificationService
from app.application.services.task_service import TaskService
from app.application.services.user_service import UserService

__all__ = [
    "DashboardService",
    "NotificationFactory",
    "NotificationService",
    "TaskService",
    "UserService",
]
