"""User directory backed by Microsoft Graph (app-only, client credentials)."""

from __future__ import annotations

import asyncio
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any

import httpx
from msal import ConfidentialClientApplication

from app.application.dtos.user import DirectoryUser
from app.domain.exceptions import UpstreamException
from app.shared.telemetry.logging import get_logger

logger = get_logger(__name__)

_SELECT_FIELDS = "displayName,mail,userPrincipalName"


class GraphUserDirectory:
    """IUserDirectory implementation using GET /users/{id} on Microsoft Graph.

    msal caches the app token in memory and renews it when it expires; token
    acquisition is blocking so it runs in a worker thread.
    """

    def __init__(
        self,
        *,
        client_id: str,
        client_secret: str,
        tenant_id: str,
        authority_host: str = "https://login.microsoftonline.com",
        graph_base_url: str = "https://graph.microsoft.com/v1.0",
        scope: str = "https://graph.microsoft.com/.default",
        http_client: httpx.AsyncClient | None = None,
        timeout: float = 10.0,
    ) -> None:
        self._app = ConfidentialClientApplication(
            client_id,
            authority=f"{authority_host.rstrip('/')}/{tenant_id}",
            client_credential=client_secret,
        )
        self._graph_url = graph_base_url.rstrip("/")
        self._scopes = [scope]
        self._shared_http = http_client
        self._timeout = timeout

    @asynccontextmanager
    async def _http_cm(self) -> AsyncIterator[httpx.AsyncClient]:
        """Yield shared HTTP client or a short-lived one (connection reuse when shared)."""
        if self._shared_http is not None:
            yield self._shared_http
            return
        async with httpx.AsyncClient(timeout=self._timeout) as client:
            yield client

    async def _access_token(self) -> str:
        result: dict[str, Any] = await asyncio.to_thread(
            self._app.acquire_token_for_client, scopes=self._scopes
        )
        token = result.get("access_token")
        if not token:
            logger.error(
                "Graph token request failed: %s", result.get("error_description")
            )
            raise UpstreamException("directory", "Could not authenticate to the user directory")
        return token

    async def get_user(self, external_id: str) -> DirectoryUser:
        token = await self._access_token()
        try:
            async with self._http_cm() as client:
                response = await client.get(
                    f"{self._graph_url}/users/{external_id}",
                    params={"$select": _SELECT_FIELDS},
                    headers={"Authorization": f"Bearer {token}"},
                )
        except httpx.HTTPError as e:
            raise UpstreamException("directory", f"User directory unreachable: {e}") from e
        if response.status_code == 404:
            logger.info("Directory has no user %s", external_id)
            return DirectoryUser()
        if response.status_code >= 400:
            raise UpstreamException(
                "directory", f"User directory returned HTTP {response.status_code}"
            )
        try:
            data = response.json()
        except ValueError as e:
            raise UpstreamException("directory", "User directory returned invalid JSON") from e
        if not isinstance(data, dict):
            raise UpstreamException("directory", "User directory returned an unexpected shape")
        return DirectoryUser(
            name=(data.get("displayName") or "").strip(),
            email=(data.get("mail") or data.get("userPrincipalName") or "").strip(),
        )


class NullUserDirectory:
    """IUserDirectory used when no directory credentials are configured.

    Always answers with blanks so provisioning falls back to placeholders.
    """

    async def get_user(self, external_id: str) -> DirectoryUser:
        logger.debug("No user directory configured; blank profile for %s", external_id)
        return DirectoryUser()
