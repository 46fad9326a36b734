"""Notification delivery: log-only publisher."""

from __future__ import annotations

import logging

from app.application.dtos.notification import NotificationResult
from app.shared.telemetry.logging import get_logger

logger = get_logger(__name__)


class LogOnlyNotificationPublisher:
    """INotificationPublisher implementation that logs instead of pushing to a channel.

    Use when no real-time channel is configured. Production can swap in a
    queue- or websocket-based implementation.
    """

    async def publish(self, notification: NotificationResult) -> None:
        """Log the notification; nothing is delivered."""
        logger.info(
            "Notification %s (%s) stored for user %s",
            notification.id,
            notification.type.value,
            notification.recipient_user_id,
        )
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("Notification title: %r", notification.title[:80])
