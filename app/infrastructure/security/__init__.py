"""Security: bearer token validation against the identity provider."""

from app.infrastructure.security.jwt import TokenValidator, get_token_validator

__all__ = [
    "TokenValidator",
    "get_token_validator",
]
