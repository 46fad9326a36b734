"""User application service: lookup, provisioning, profile edit and search."""

from __future__ import annotations

from dataclasses import replace

from app.application.dtos.common import PagedResult
from app.application.dtos.user import (
    DirectoryUser,
    ProvisionResult,
    UserCreate,
    UserResult,
    UserSummary,
)
from app.application.interfaces.repositories import IUserRepository
from app.application.interfaces.services import IUserDirectory
from app.domain.exceptions import ResourceNotFoundException, ValidationException
from app.domain.identity import is_empty_external_id
from app.shared.telemetry.logging import get_logger
from app.shared.utils.datetime import utc_now

logger = get_logger(__name__)

PLACEHOLDER_NAME = "Unknown"
NAME_MAX_LENGTH = 100
EMAIL_MAX_LENGTH = 256


def placeholder_email(external_id: str) -> str:
    return f"{external_id}@no-reply.local"


def _first_non_blank(*values: str | None) -> str:
    for value in values:
        if value and value.strip():
            return value.strip()
    return ""


class UserService:
    """Maps identity-provider subjects to internal users; provisions on first sight."""

    def __init__(self, user_repo: IUserRepository, directory: IUserDirectory) -> None:
        self._user_repo = user_repo
        self._directory = directory

    async def get_by_external_id(self, external_id: str) -> UserResult | None:
        """Exact lookup; the empty sentinel never matches."""
        if is_empty_external_id(external_id):
            return None
        return await self._user_repo.get_by_external_id(external_id)

    async def provision_current_user(
        self,
        external_id: str,
        hint: DirectoryUser | None = None,
        *,
        record_login: bool = False,
    ) -> ProvisionResult:
        """Return the existing user or create one from the directory profile.

        Blank directory values fall back to ``hint`` and then to placeholders.
        With record_login, last_login_at is stamped on the returned user.
        """
        if is_empty_external_id(external_id):
            raise ValidationException("External id is required", field="externalId")
        existing = await self._user_repo.get_by_external_id(external_id)
        if existing is not None:
            if record_login:
                now = utc_now()
                await self._user_repo.touch_last_login(existing.id)
                existing = replace(existing, last_login_at=now)
            return ProvisionResult(user=existing, created=False)

        profile = await self._directory.get_user(external_id)
        hint = hint or DirectoryUser()
        name = _first_non_blank(profile.name, hint.name) or PLACEHOLDER_NAME
        email = _first_non_blank(profile.email, hint.email) or placeholder_email(external_id)
        user, created = await self._user_repo.add(
            UserCreate(
                external_id=external_id,
                name=name[:NAME_MAX_LENGTH],
                email=email[:EMAIL_MAX_LENGTH],
                last_login_at=utc_now() if record_login else None,
            )
        )
        if created:
            logger.info("Provisioned user %s for %s", user.id, external_id)
        return ProvisionResult(user=user, created=created)

    async def get_current_user(self, external_id: str) -> UserResult:
        """Lookup falling back to provisioning."""
        user = await self.get_by_external_id(external_id)
        if user is not None:
            return user
        return (await self.provision_current_user(external_id)).user

    async def update_current_user(
        self, external_id: str, name: str | None = None
    ) -> UserResult:
        """Apply non-blank fields only. Raises ResourceNotFoundException if no user matches."""
        user = await self.get_by_external_id(external_id)
        if user is None:
            raise ResourceNotFoundException("user", external_id)
        new_name = (name or "").strip()
        if not new_name or new_name == user.name:
            return user
        updated = await self._user_repo.update_name(user.id, new_name[:NAME_MAX_LENGTH])
        if updated is None:
            raise ResourceNotFoundException("user", external_id)
        return updated

    async def search_users(
        self, search: str | None, page: int = 1, page_size: int = 20
    ) -> PagedResult[UserSummary]:
        return await self._user_repo.query(search, page, page_size)

    async def find_user(self, identifier: str) -> UserResult | None:
        """Resolve an identifier that may be an external id or an internal id."""
        user = await self.get_by_external_id(identifier)
        if user is None and identifier:
            user = await self._user_repo.get_by_id(identifier)
        return user

    async def get_user_summary(self, external_id: str) -> UserSummary | None:
        user = await self.get_by_external_id(external_id)
        if user is None:
            return None
        return UserSummary(
            id=user.id,
            external_id=user.external_id,
            name=user.name,
            email=user.email,
        )
