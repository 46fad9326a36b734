"""Messaging: notification publishers."""

from app.infrastructure.messaging.notification_publisher import (
    LogOnlyNotificationPublisher,
)

__all__ = ["LogOnlyNotificationPublisher"]
