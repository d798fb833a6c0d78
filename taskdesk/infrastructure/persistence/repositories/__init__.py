"""SQLAlchemy repositories (implement application repository protocols)."""

from taskdesk.infrastructure.persistence.repositories.notification_repo import (
    NotificationRepository,
)
from taskdesk.infrastructure.persistence.repositories.task_repo import TaskRepository
from taskdesk.infrastructure.persistence.repositories.user_repo import UserRepository

__all__ = [
    "NotificationRepository",
    "TaskRepository",
    "UserRepository",
]
