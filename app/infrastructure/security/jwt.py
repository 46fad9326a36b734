"""Bearer token validation against an OpenID Connect identity provider.

Signing keys come from the provider's discovery document
({authority}/.well-known/openid-configuration -> jwks_uri). They are fetched
once per process and refetched when a token names an unknown key id, at
most once per refresh cooldown.
"""

from __future__ import annotations

import asyncio
import time
from functools import lru_cache
from typing import Any

import httpx
from jose import JWTError, jwt

from app.core.config import get_settings
from app.domain.exceptions import AuthenticationException, UpstreamException
from app.shared.telemetry.logging import get_logger

logger = get_logger(__name__)


class TokenValidator:
    """Validates RS256 access tokens: signature, issuer, audience and expiry.

    One instance per process (see get_token_validator). Configuration is
    fixed at construction; only the JWKS cache is filled lazily.
    """

    def __init__(
        self,
        *,
        authority: str,
        audience: str,
        algorithms: list[str] | None = None,
        user_claim: str = "oid",
        http_client: httpx.AsyncClient | None = None,
        timeout: float = 10.0,
        refresh_cooldown_seconds: float = 300.0,
    ) -> None:
        self.authority = authority.rstrip("/")
        self.audience = audience
        self.algorithms = algorithms or ["RS256"]
        self.user_claim = user_claim
        self._http = http_client
        self._timeout = timeout
        self._jwks: dict[str, Any] | None = None
        self._refresh_cooldown = refresh_cooldown_seconds
        self._last_refresh: float | None = None
        self._lock = asyncio.Lock()

    @property
    def discovery_url(self) -> str:
        return f"{self.authority}/.well-known/openid-configuration"

    async def _get_json(self, client: httpx.AsyncClient, url: str) -> dict[str, Any]:
        try:
            response = await client.get(url)
            response.raise_for_status()
            data = response.json()
        except (httpx.HTTPError, ValueError) as e:
            logger.error("Identity provider request failed for %s: %s", url, e)
            raise UpstreamException("identity", "Could not load token signing keys") from e
        if not isinstance(data, dict):
            raise UpstreamException("identity", "Identity provider returned an unexpected shape")
        return data

    async def _fetch_jwks(self) -> dict[str, Any]:
        if self._http is not None:
            return await self._fetch_jwks_with(self._http)
        async with httpx.AsyncClient(timeout=self._timeout) as client:
            return await self._fetch_jwks_with(client)

    async def _fetch_jwks_with(self, client: httpx.AsyncClient) -> dict[str, Any]:
        discovery = await self._get_json(client, self.discovery_url)
        jwks_uri = discovery.get("jwks_uri")
        if not jwks_uri:
            raise UpstreamException("identity", "Discovery document has no jwks_uri")
        jwks = await self._get_json(client, jwks_uri)
        if not isinstance(jwks.get("keys"), list):
            raise UpstreamException("identity", "JWKS document has no keys")
        logger.info("Loaded %d signing keys from %s", len(jwks["keys"]), jwks_uri)
        return jwks

    def _refresh_allowed(self) -> bool:
        if self._last_refresh is None:
            return True
        return time.monotonic() - self._last_refresh >= self._refresh_cooldown

    async def _signing_keys(self, *, refresh: bool = False) -> dict[str, Any]:
        """Cached JWKS. A forced refresh is skipped inside the cooldown."""
        async with self._lock:
            if self._jwks is None:
                self._jwks = await self._fetch_jwks()
            elif refresh and self._refresh_allowed():
                self._last_refresh = time.monotonic()
                self._jwks = await self._fetch_jwks()
            return self._jwks

    @staticmethod
    def _find_key(jwks: dict[str, Any], kid: str) -> dict[str, Any] | None:
        for key in jwks["keys"]:
            if key.get("kid") == kid:
                return key
        return None

    async def _key_for(self, token: str) -> dict[str, Any]:
        try:
            header = jwt.get_unverified_header(token)
        except JWTError as e:
            raise AuthenticationException("Malformed token") from e
        kid = header.get("kid")
        jwks = await self._signing_keys()
        if not kid:
            return jwks
        key = self._find_key(jwks, kid)
        if key is None:
            # Provider may have rotated keys since the last fetch.
            key = self._find_key(await self._signing_keys(refresh=True), kid)
        if key is None:
            raise AuthenticationException("Token signed with an unknown key")
        return key

    async def validate(self, token: str) -> dict[str, Any]:
        """Return the verified claims or raise AuthenticationException."""
        if not token:
            raise AuthenticationException("Token is missing")
        key = await self._key_for(token)
        try:
            claims = jwt.decode(
                token,
                key,
                algorithms=self.algorithms,
                audience=self.audience,
                issuer=self.authority,
                options={"require_exp": True},
            )
        except JWTError as e:
            raise AuthenticationException(f"Invalid token: {e!s}") from e
        return claims

    def external_id(self, claims: dict[str, Any]) -> str:
        """Caller identity from the configured claim, falling back to sub."""
        value = claims.get(self.user_claim) or claims.get("sub")
        if not value or not isinstance(value, str):
            raise AuthenticationException(f"Token missing required claim: {self.user_claim}")
        return value


@lru_cache
def get_token_validator() -> TokenValidator:
    """Return the process-wide validator built from settings."""
    settings = get_settings()
    return TokenValidator(
        authority=settings.authority,
        audience=settings.identity_client_id,
        algorithms=[a.strip() for a in settings.identity_algorithms.split(",") if a.strip()],
        user_claim=settings.identity_user_claim,
        timeout=settings.identity_http_timeout_seconds,
        refresh_cooldown_seconds=settings.identity_jwks_refresh_cooldown_seconds,
    )
