"""Application interfaces (ports): repository and service protocols.

Define contracts for infrastructure implementations (DIP).
No runtime imports from app.infrastructure or app.api.
"""

from app.application.interfaces.repositories import (
    INotificationRepository,
    ITaskRepository,
    IUserRepository,
)
from app.application.interfaces.services import (
    INotificationPublisher,
    IUserDirectory,
)

__all__ = [
    "INotificationPublisher",
    "INotificationRepository",
    "ITaskRepository",
    "IUserDirectory",
    "IUserRepository",
]
