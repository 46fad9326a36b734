"""API v1 dependencies (composition root). Routes import from here."""

from app.api.v1.dependencies.auth import (
    CurrentExternalId,
    bearer_scheme,
    get_current_external_id,
)
from app.api.v1.dependencies.db import ReadSession, WriteSession
from app.api.v1.dependencies.services import (
    get_dashboard_service,
    get_notification_publisher,
    get_notification_service,
    get_task_service,
    get_user_directory,
    get_user_read_service,
    get_user_service,
)

__all__ = [
    "CurrentExternalId",
    "ReadSession",
    "WriteSession",
    "bearer_scheme",
    "get_current_external_id",
    "get_dashboard_service",
    "get_notification_publisher",
    "get_notification_service",
    "get_task_service",
    "get_user_directory",
    "get_user_read_service",
    "get_user_service",
]
