"""Notification operations: an actor reads and manages their own notifications."""

from __future__ import annotations

from taskdesk.application.dtos.notification import NotificationResult
from taskdesk.application.interfaces.repositories import INotificationRepository
from taskdesk.domain.entities.actor import ActorEntity
from taskdesk.domain.exceptions import ResourceNotFoundException


class NotificationService:
    """List, mark read/unread and delete notifications addressed to the actor.

    Notifications of other users are reported as not found.
    """

    def __init__(self, notification_repo: INotificationRepository) -> None:
        self.notification_repo = notification_repo

    async def list_notifications(
        self,
        actor: ActorEntity,
        read: bool | None = None,
        limit: int = 10,
        offset: int = 0,
    ) -> list[NotificationResult]:
        return await self.notification_repo.list_for_user(
            actor.id, read=read, limit=limit, offset=offset
        )

    async def set_read(
        self, actor: ActorEntity, notification_id: int, read: bool
    ) -> NotificationResult:
        await self._get_own(actor, notification_id)
        updated = await self.notification_repo.set_read(notification_id, read)
        if updated is None:
            raise ResourceNotFoundException("notification", notification_id)
        return updated

    async def delete_notification(
        self, actor: ActorEntity, notification_id: int
    ) -> None:
        await self._get_own(actor, notification_id)
        await self.notification_repo.delete_notification(notification_id)

    async def _get_own(
        self, actor: ActorEntity, notification_id: int
    ) -> NotificationResult:
        notification = await self.notification_repo.get_for_user(
            notification_id, actor.id
        )
        if notification is None:
            raise ResourceNotFoundException("notification", notification_id)
        return notification
