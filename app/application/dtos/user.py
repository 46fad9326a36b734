"""DTOs for user use cases (no dependency on ORM)."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class UserResult:
    """User read-model (result of get_by_external_id, provision, update)."""

    id: str
    external_id: str
    name: str
    email: str
    created_at: datetime
    last_login_at: datetime | None = None


@dataclass(frozen=True)
class UserSummary:
    """Compact user reference embedded in task and search results."""

    id: str
    external_id: str
    name: str
    email: str


@dataclass(frozen=True)
class UserCreate:
    """Data for inserting a newly provisioned user."""

    external_id: str
    name: str
    email: str
    last_login_at: datetime | None = None


@dataclass(frozen=True)
class DirectoryUser:
    """Profile returned by the external user directory; fields may be blank."""

    name: str = ""
    email: str = ""


@dataclass(frozen=True)
class ProvisionResult:
    """Outcome of explicit provisioning: the user and whether it was just created."""

    user: UserResult
    created: bool
