"""Caller identity from the bearer token (composition root)."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from app.domain.exceptions import AuthenticationException
from app.infrastructure.security.jwt import TokenValidator, get_token_validator

bearer_scheme = HTTPBearer(auto_error=False)


async def get_current_external_id(
    credentials: Annotated[
        HTTPAuthorizationCredentials | None, Depends(bearer_scheme)
    ],
    validator: Annotated[TokenValidator, Depends(get_token_validator)],
) -> str:
    """Validate the bearer token and return the caller's external id.

    Raises AuthenticationException (401) when the token is missing or invalid.
    """
    if credentials is None or not credentials.credentials:
        raise AuthenticationException("Token is missing")
    claims = await validator.validate(credentials.credentials)
    return validator.external_id(claims)


CurrentExternalId = Annotated[str, Depends(get_current_external_id)]
