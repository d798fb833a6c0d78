"""Notification use cases."""

from taskdesk.application.use_cases.notifications.notification_operations import (
    NotificationService,
)

__all__ = ["NotificationService"]
