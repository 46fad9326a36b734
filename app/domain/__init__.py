"""Domain layer: enums and exceptions.

No dependencies on infrastructure or presentation. Used by application
and infrastructure layers.
"""

from app.domain.enums import NotificationType, TaskScope, TaskStatus
from app.domain.exceptions import (
    AuthenticationException,
    AuthorizationException,
    ConflictException,
    ResourceNotFoundException,
    TaskboardException,
    UpstreamException,
    ValidationException,
)

__all__ = [
    # Enums
    "NotificationType",
    "TaskScope",
    "TaskStatus",
    # Exceptions
    "AuthenticationException",
    "AuthorizationException",
    "ConflictException",
    "ResourceNotFoundException",
    "TaskboardException",
    "UpstreamException",
    "ValidationException",
]
