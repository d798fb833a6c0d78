"""Notification repository. Implements INotificationRepository."""

from __future__ import annotations

from typing import Any

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from taskdesk.application.dtos.notification import NotificationResult
from taskdesk.infrastructure.persistence.models.notification import Notification
from taskdesk.shared.utils.datetime import ensure_utc, utc_now


def _to_result(n: Notification) -> NotificationResult:
    return NotificationResult(
        id=n.id,
        user_id=n.user_id,
        type=n.type,
        title=n.title,
        message=n.message,
        read=n.read,
        metadata=n.extra,
        created_at=ensure_utc(n.created_at),
    )


class NotificationRepository:
    """Notification repository. Implements INotificationRepository."""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def create_notification(
        self,
        user_id: int,
        type: str,
        title: str,
        message: str,
        metadata: dict[str, Any] | None = None,
    ) -> NotificationResult:
        orm = Notification(
            user_id=user_id,
            type=type,
            title=title,
            message=message,
            read=False,
            extra=metadata,
            created_at=utc_now(),
        )
        self.db.add(orm)
        await self.db.flush()
        await self.db.refresh(orm)
        return _to_result(orm)

    async def _get_orm(self, notification_id: int) -> Notification | None:
        result = await self.db.execute(
            select(Notification).where(Notification.id == notification_id)
        )
        return result.scalar_one_or_none()

    async def get_for_user(
        self, notification_id: int, user_id: int
    ) -> NotificationResult | None:
        result = await self.db.execute(
            select(Notification).where(
                Notification.id == notification_id,
                Notification.user_id == user_id,
            )
        )
        row = result.scalar_one_or_none()
        return _to_result(row) if row else None

    async def list_for_user(
        self,
        user_id: int,
        read: bool | None = None,
        limit: int = 10,
        offset: int = 0,
    ) -> list[NotificationResult]:
        """Return the user's notifications, newest first."""
        stmt = select(Notification).where(Notification.user_id == user_id)
        if read is not None:
            stmt = stmt.where(Notification.read == read)
        stmt = (
            stmt.order_by(Notification.created_at.desc(), Notification.id.desc())
            .offset(offset)
            .limit(limit)
        )
        result = await self.db.execute(stmt)
        return [_to_result(n) for n in result.scalars().all()]

    async def set_read(
        self, notification_id: int, read: bool
    ) -> NotificationResult | None:
        orm = await self._get_orm(notification_id)
        if orm is None:
            return None
        orm.read = read
        await self.db.flush()
        return _to_result(orm)

    async def delete_notification(self, notification_id: int) -> bool:
        result = await self.db.execute(
            delete(Notification).where(Notification.id == notification_id)
        )
        return result.rowcount == 1
