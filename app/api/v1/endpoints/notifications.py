"""Notification API: caller's notifications, create and mark read."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request, Response

from app.api.v1.dependencies import CurrentExternalId, get_notification_service
from app.application.dtos.notification import CreateNotificationCommand
from app.application.services import NotificationService
from app.core.limiter import limit_writes
from app.schemas.common import PagedResponse
from app.schemas.notification import (
    NotificationCreateRequest,
    NotificationResponse,
    UnreadCountResponse,
)

router = APIRouter()


@router.get("", response_model=PagedResponse[NotificationResponse])
async def list_notifications(
    external_id: CurrentExternalId,
    notification_svc: Annotated[NotificationService, Depends(get_notification_service)],
    page: int = 1,
    page_size: Annotated[int, Query(alias="pageSize")] = 20,
):
    """Caller's notifications, newest first."""
    result = await notification_svc.get_by_user(external_id, page=page, page_size=page_size)
    return PagedResponse[NotificationResponse].model_validate(result)


@router.get("/unread-count", response_model=UnreadCountResponse)
async def unread_count(
    external_id: CurrentExternalId,
    notification_svc: Annotated[NotificationService, Depends(get_notification_service)],
):
    count = await notification_svc.get_unread_count(external_id)
    return UnreadCountResponse(count=count)


@router.post("", response_model=NotificationResponse, status_code=201)
@limit_writes
async def create_notification(
    request: Request,
    body: NotificationCreateRequest,
    _external_id: CurrentExternalId,
    notification_svc: Annotated[NotificationService, Depends(get_notification_service)],
):
    """Create a notification for a recipient given by external or internal id."""
    created = await notification_svc.create(
        CreateNotificationCommand(
            recipient=body.recipient_user_id,
            title=body.title,
            message=body.message,
            type=body.type,
            related_task_id=body.related_task_id,
        )
    )
    return NotificationResponse.model_validate(created)


@router.post("/readAll", status_code=204)
@limit_writes
async def mark_all_read(
    request: Request,
    external_id: CurrentExternalId,
    notification_svc: Annotated[NotificationService, Depends(get_notification_service)],
) -> Response:
    await notification_svc.mark_all_as_read(external_id)
    return Response(status_code=204)


@router.post("/{notification_id}/read", status_code=204)
@limit_writes
async def mark_read(
    request: Request,
    notification_id: str,
    external_id: CurrentExternalId,
    notification_svc: Annotated[NotificationService, Depends(get_notification_service)],
) -> Response:
    """Mark one of the caller's notifications read; unknown ids are a no-op."""
    await notification_svc.mark_as_read(notification_id, external_id)
    return Response(status_code=204)
