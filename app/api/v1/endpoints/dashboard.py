"""Dashboard API."""

from typing import Annotated

from fastapi import APIRouter, Depends

from app.api.v1.dependencies import CurrentExternalId, get_dashboard_service
from app.application.services import DashboardService
from app.schemas.dashboard import DashboardResponse

router = APIRouter()


@router.get("", response_model=DashboardResponse)
async def get_dashboard(
    external_id: CurrentExternalId,
    dashboard_svc: Annotated[DashboardService, Depends(get_dashboard_service)],
):
    """Tasks due today, this week, this month and upcoming, with status counts."""
    summary = await dashboard_svc.get_dashboard(external_id)
    return DashboardResponse.model_validate(summary)
