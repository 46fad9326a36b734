"""User API: current user, provisioning, profile edit and search."""

from typing import Annotated

from fastapi import APIRouter, Body, Depends, Query, Request, Response

from app.api.v1.dependencies import (
    CurrentExternalId,
    get_user_read_service,
    get_user_service,
)
from app.application.dtos.user import DirectoryUser
from app.application.services import UserService
from app.core.limiter import limit_provision, limit_writes
from app.domain.exceptions import ResourceNotFoundException
from app.schemas.common import PagedResponse
from app.schemas.user import (
    UserProvisionRequest,
    UserResponse,
    UserSummaryResponse,
    UserUpdateRequest,
)

router = APIRouter()


@router.get("", response_model=PagedResponse[UserSummaryResponse])
async def search_users(
    _external_id: CurrentExternalId,
    user_svc: Annotated[UserService, Depends(get_user_read_service)],
    search: str | None = None,
    page: int = 1,
    page_size: Annotated[int, Query(alias="pageSize")] = 20,
):
    """Case-insensitive search on name or email, ordered by name."""
    result = await user_svc.search_users(search, page=page, page_size=page_size)
    return PagedResponse[UserSummaryResponse].model_validate(result)


@router.get("/me", response_model=UserResponse)
async def get_me(
    external_id: CurrentExternalId,
    user_svc: Annotated[UserService, Depends(get_user_service)],
):
    """Caller's profile; provisions the user on first call."""
    user = await user_svc.get_current_user(external_id)
    return UserResponse.model_validate(user)


@router.patch("/me", response_model=UserResponse)
@limit_writes
async def update_me(
    request: Request,
    body: UserUpdateRequest,
    external_id: CurrentExternalId,
    user_svc: Annotated[UserService, Depends(get_user_service)],
):
    """Update the caller's display name. Blank values are ignored."""
    user = await user_svc.update_current_user(external_id, name=body.name)
    return UserResponse.model_validate(user)


@router.post(
    "/provision",
    response_model=UserResponse,
    responses={201: {"model": UserResponse, "description": "User created"}},
)
@limit_provision
async def provision_user(
    request: Request,
    response: Response,
    external_id: CurrentExternalId,
    user_svc: Annotated[UserService, Depends(get_user_service)],
    body: Annotated[UserProvisionRequest | None, Body()] = None,
):
    """Create the caller's user if needed: 201 with Location when created, else 200."""
    hint = DirectoryUser(name=body.name or "", email=body.email or "") if body else None
    result = await user_svc.provision_current_user(
        external_id, hint, record_login=True
    )
    if result.created:
        response.status_code = 201
        base = request.url.path.rsplit("/", 1)[0]
        response.headers["Location"] = f"{base}/{result.user.external_id}"
    return UserResponse.model_validate(result.user)


@router.get("/{external_id}", response_model=UserSummaryResponse)
async def get_user(
    external_id: str,
    _caller: CurrentExternalId,
    user_svc: Annotated[UserService, Depends(get_user_read_service)],
):
    """User summary by external id; 404 when unknown."""
    summary = await user_svc.get_user_summary(external_id)
    if summary is None:
        raise ResourceNotFoundException("user", external_id)
    return UserSummaryResponse.model_validate(summary)
