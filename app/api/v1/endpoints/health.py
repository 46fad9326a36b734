"""Health check endpoints: liveness and database readiness."""

from fastapi import APIRouter
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from app.api.v1.dependencies import ReadSession
from app.core.config import get_settings
from app.schemas.health import HealthResponse, ReadinessErrorResponse
from app.shared.telemetry.logging import get_logger

logger = get_logger(__name__)

router = APIRouter()


@router.get("", response_model=HealthResponse)
def health_check() -> HealthResponse:
    """Return simple ok status for liveness."""
    return HealthResponse(version=get_settings().app_version)


@router.get(
    "/ready",
    response_model=HealthResponse,
    responses={503: {"description": "Database unreachable", "model": ReadinessErrorResponse}},
)
async def readiness_check(db: ReadSession) -> HealthResponse | JSONResponse:
    """Return 200 when the database answers SELECT 1; 503 otherwise."""
    try:
        await db.execute(text("SELECT 1"))
    except (SQLAlchemyError, OSError) as e:
        logger.warning("Readiness check failed: %s", e)
        return JSONResponse(
            status_code=503,
            content=ReadinessErrorResponse(message="Database unreachable").model_dump(),
        )
    return HealthResponse(version=get_settings().app_version)
