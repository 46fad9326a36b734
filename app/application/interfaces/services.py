"""Service interfaces (ports) for the application layer.

Protocols define contracts for external collaborators (DIP).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from app.application.dtos.notification import NotificationResult
    from app.application.dtos.user import DirectoryUser


# User directory interface
class IUserDirectory(Protocol):
    """Protocol for looking up a user's profile in the identity directory."""

    async def get_user(self, external_id: str) -> DirectoryUser:
        """Return display name and email; blanks when the directory has none.

        Raises UpstreamException when the directory is unreachable or
        answers with an unexpected shape.
        """


# Notification publisher interface
class INotificationPublisher(Protocol):
    """Protocol for delivering a stored notification to its recipient."""

    async def publish(self, notification: NotificationResult) -> None:
        """Fire-and-forget delivery; must not raise for delivery failures."""
