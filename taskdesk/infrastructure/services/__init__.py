"""Infrastructure services (implement application service protocols)."""

from taskdesk.infrastructure.services.notification_dispatcher import (
    DatabaseNotificationDispatcher,
)

__all__ = ["DatabaseNotificationDispatcher"]
