"""Notification dispatcher: stores workflow notification events as in-app notifications."""

from __future__ import annotations

import logging

from taskdesk.application.interfaces.repositories import INotificationRepository
from taskdesk.domain.entities.notification import NotificationEvent

logger = logging.getLogger(__name__)


class DatabaseNotificationDispatcher:
    """INotificationDispatcher implementation that writes one row per event.

    Runs inside the caller's transaction, so events are stored only when the
    task change that produced them commits.
    """

    def __init__(self, notification_repo: INotificationRepository) -> None:
        self.notification_repo = notification_repo

    async def dispatch(self, events: list[NotificationEvent]) -> None:
        """Persist each event for its recipient, in order."""
        if not events:
            return
        for event in events:
            await self.notification_repo.create_notification(
                user_id=event.recipient_id,
                type=event.type.value,
                title=event.title,
                message=event.body,
                metadata=dict(event.metadata),
            )
        logger.info(
            "Dispatched %d notification(s) (type=%s, task=%s)",
            len(events),
            events[0].type.value,
            events[0].task_id,
        )
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("Notification recipients: %s", [e.recipient_id for e in events])
