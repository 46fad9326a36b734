"""Application lifespan: startup and shutdown.

Only infrastructure wiring lives here: logging, SQL instrumentation when
telemetry is on, and engine disposal.
"""

from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from app.core.config import get_settings
from app.infrastructure.persistence import database
from app.shared.telemetry.logging import get_logger, setup_logging

logger = get_logger(__name__)


@asynccontextmanager
async def create_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Run startup then yield; on exit flush telemetry and dispose the engine."""
    settings = get_settings()
    setup_logging()

    telemetry = getattr(app.state, "telemetry", None)
    if telemetry is not None:
        database._ensure_engine()
        if database.engine is not None:
            telemetry.instrument_sqlalchemy(database.engine)
    logger.info("%s %s started", settings.app_name, settings.app_version)

    yield

    if telemetry is not None:
        telemetry.shutdown()
        logger.info("Telemetry shutdown complete")

    await database.dispose_engine()
