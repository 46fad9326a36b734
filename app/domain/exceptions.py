"""Domain exceptions for the Taskboard application.

Defines domain-level exceptions that represent business rule violations.
These exceptions are independent of infrastructure concerns. Presentation
layer maps them to HTTP responses in exception handlers.
"""

from typing import Any


class TaskboardException(Exception):
    """Base exception for all Taskboard application errors.

    All custom exceptions should inherit from this class to allow
    consistent error handling and logging. Presentation layer maps
    these to HTTP responses using message, error_code, and details.

    Attributes:
        message: Human-readable error description.
        error_code: Machine-readable error code.
        details: Additional error context (e.g. field, resource_id).
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description.
            error_code: Optional machine-readable code; defaults to class name.
            details: Optional dict of extra context.
        """
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Uniform error body: success flag, message, code and details."""
        return {
            "success": False,
            "error": self.message,
            "code": self.error_code,
            "details": self.details,
        }


class ValidationException(TaskboardException):
    """Raised when input validation fails (e.g. invalid format or range)."""

    def __init__(self, message: str, field: str | None = None) -> None:
        """Initialize with message and optional field name.

        Args:
            message: Description of the validation failure.
            field: Optional field or attribute that failed validation.
        """
        details = {"field": field} if field else {}
        super().__init__(message, "VALIDATION_ERROR", details)


class AuthenticationException(TaskboardException):
    """Raised when authentication fails (e.g. missing, expired or forged token)."""

    def __init__(self, message: str = "Authentication failed") -> None:
        """Initialize with optional message.

        Args:
            message: Description of the authentication failure.
        """
        super().__init__(message, "AUTHENTICATION_ERROR")


class AuthorizationException(TaskboardException):
    """Raised when the caller is neither creator nor assignee of a resource."""

    def __init__(
        self,
        resource: str | None = None,
        resource_id: str | None = None,
        message: str = "You are not allowed to access this resource",
    ) -> None:
        """Initialize with optional resource type, id and message.

        Args:
            resource: Optional resource type (e.g. 'task').
            resource_id: Optional id of the resource that was denied.
            message: Human-readable message.
        """
        details: dict[str, Any] = {}
        if resource:
            details["resource"] = resource
        if resource_id:
            details["resource_id"] = resource_id
        super().__init__(message, "AUTHORIZATION_ERROR", details)


class ResourceNotFoundException(TaskboardException):
    """Raised when a requested resource is not found."""

    def __init__(self, resource_type: str, resource_id: str) -> None:
        """Initialize with resource type and id.

        Args:
            resource_type: Type of resource (e.g. 'task', 'user').
            resource_id: The ID that was not found.
        """
        super().__init__(
            f"{resource_type} not found: {resource_id}",
            "RESOURCE_NOT_FOUND",
            {"resource_type": resource_type, "resource_id": resource_id},
        )


class ConflictException(TaskboardException):
    """Raised when a write loses against concurrent changes or breaks integrity."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message, "CONFLICT", details)


class UpstreamException(TaskboardException):
    """Raised when an external collaborator (directory, identity provider) fails."""

    def __init__(self, service: str, message: str | None = None) -> None:
        """Initialize with the failing service name.

        Args:
            service: Short name of the upstream (e.g. 'directory', 'identity').
            message: Optional description; a generic one is built otherwise.
        """
        super().__init__(
            message or f"Upstream service unavailable: {service}",
            "UPSTREAM_ERROR",
            {"service": service},
        )
