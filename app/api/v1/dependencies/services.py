"""Application service dependencies (composition root).

Services are built per request from repositories on the request's session.
Process-wide collaborators (user directory, publisher) are built once.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from app.api.v1.dependencies.db import ReadSession, WriteSession
from app.application.interfaces.services import INotificationPublisher, IUserDirectory
from app.application.services import (
    DashboardService,
    NotificationService,
    TaskService,
    UserService,
)
from app.core.config import get_settings
from app.infrastructure.external.directory import GraphUserDirectory, NullUserDirectory
from app.infrastructure.messaging import LogOnlyNotificationPublisher
from app.infrastructure.persistence.repositories import (
    NotificationRepository,
    TaskRepository,
    UserRepository,
)
from app.shared.telemetry.logging import get_logger

logger = get_logger(__name__)


@lru_cache
def get_user_directory() -> IUserDirectory:
    """Graph directory when credentials are configured, else the null directory."""
    settings = get_settings()
    if not settings.graph_enabled:
        logger.warning("Graph credentials not configured; provisioning uses placeholders")
        return NullUserDirectory()
    secret = settings.graph_client_secret
    return GraphUserDirectory(
        client_id=settings.graph_client_id or "",
        client_secret=secret.get_secret_value() if secret else "",
        tenant_id=settings.graph_tenant_id or "",
        authority_host=settings.graph_authority_host,
        graph_base_url=settings.graph_base_url,
        scope=settings.graph_scope,
    )


@lru_cache
def get_notification_publisher() -> INotificationPublisher:
    return LogOnlyNotificationPublisher()


def get_user_service(
    db: WriteSession,
    directory: Annotated[IUserDirectory, Depends(get_user_directory)],
) -> UserService:
    """UserService on the transactional session (may provision)."""
    return UserService(UserRepository(db), directory)


def get_user_read_service(
    db: ReadSession,
    directory: Annotated[IUserDirectory, Depends(get_user_directory)],
) -> UserService:
    """UserService for pure lookups (search, summary by external id)."""
    return UserService(UserRepository(db), directory)


def get_notification_service(
    db: WriteSession,
    user_service: Annotated[UserService, Depends(get_user_service)],
    publisher: Annotated[INotificationPublisher, Depends(get_notification_publisher)],
) -> NotificationService:
    return NotificationService(NotificationRepository(db), user_service, publisher)


def get_task_service(
    db: WriteSession,
    user_service: Annotated[UserService, Depends(get_user_service)],
    notification_service: Annotated[
        NotificationService, Depends(get_notification_service)
    ],
) -> TaskService:
    return TaskService(TaskRepository(db), user_service, notification_service)


def get_dashboard_service(
    task_service: Annotated[TaskService, Depends(get_task_service)],
    user_service: Annotated[UserService, Depends(get_user_service)],
) -> DashboardService:
    return DashboardService(task_service, user_service)
