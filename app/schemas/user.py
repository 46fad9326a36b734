"""User API schemas."""

from datetime import datetime

from pydantic import Field

from app.schemas.common import CamelModel


class UserSummaryResponse(CamelModel):
    """Compact user reference (search results, task creator/assignee)."""

    id: str
    external_id: str
    name: str
    email: str


class UserResponse(CamelModel):
    """Current user profile."""

    id: str
    external_id: str
    name: str
    email: str
    created_at: datetime
    last_login_at: datetime | None = None


class UserProvisionRequest(CamelModel):
    """Optional body for POST /users/provision; used when the directory has no profile."""

    name: str | None = Field(default=None, max_length=100)
    email: str | None = Field(default=None, max_length=256)


class UserUpdateRequest(CamelModel):
    """Request body for PATCH /users/me (partial)."""

    name: str | None = Field(default=None, max_length=100)
