"""API v1 router aggregation.

Includes all endpoint modules with consistent prefix and tags. All routes
use dependencies from app.api.v1.dependencies (no manual repo/service construction).
Error statuses are documented with the uniform ErrorResponse body.
"""

from typing import Any

from fastapi import APIRouter

from app.api.v1.endpoints import dashboard, health, notifications, tasks, users
from app.schemas.common import ErrorResponse

ERROR_RESPONSES: dict[int | str, dict[str, Any]] = {
    400: {"model": ErrorResponse, "description": "Validation error"},
    401: {"model": ErrorResponse, "description": "Missing or invalid token, or not the task owner"},
    404: {"model": ErrorResponse, "description": "Not found"},
    409: {"model": ErrorResponse, "description": "Conflict"},
    429: {"model": ErrorResponse, "description": "Rate limited"},
}

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(
    dashboard.router, prefix="/dashboard", tags=["dashboard"], responses=ERROR_RESPONSES
)
api_router.include_router(
    tasks.router, prefix="/tasks", tags=["tasks"], responses=ERROR_RESPONSES
)
api_router.include_router(
    users.router, prefix="/users", tags=["users"], responses=ERROR_RESPONSES
)
api_router.include_router(
    notifications.router,
    prefix="/notifications",
    tags=["notifications"],
    responses=ERROR_RESPONSES,
)
