"""Task and notification service dependencies (composition root)."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from taskdesk.application.use_cases.notifications import NotificationService
from taskdesk.application.use_cases.tasks import TaskService
from taskdesk.core.config import get_settings
from taskdesk.infrastructure.persistence.database import get_db, get_db_transactional
from taskdesk.infrastructure.persistence.repositories import (
    NotificationRepository,
    TaskRepository,
    UserRepository,
)
from taskdesk.infrastructure.services import DatabaseNotificationDispatcher


def _build_task_service(db: AsyncSession) -> TaskService:
    """TaskService on one session; notifications are stored in the same transaction."""
    return TaskService(
        task_repo=TaskRepository(db),
        user_repo=UserRepository(db),
        dispatcher=DatabaseNotificationDispatcher(NotificationRepository(db)),
        max_save_attempts=get_settings().task_save_max_attempts,
    )


async def get_task_service(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> TaskService:
    """TaskService for read operations."""
    return _build_task_service(db)


async def get_task_service_for_write(
    db: Annotated[AsyncSession, Depends(get_db_transactional)],
) -> TaskService:
    """TaskService for writes (transactional)."""
    return _build_task_service(db)


async def get_notification_service(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> NotificationService:
    return NotificationService(NotificationRepository(db))


async def get_notification_service_for_write(
    db: Annotated[AsyncSession, Depends(get_db_transactional)],
) -> NotificationService:
    return NotificationService(NotificationRepository(db))
