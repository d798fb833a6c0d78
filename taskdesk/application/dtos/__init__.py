"""Application DTOs (no ORM dependency)."""

from taskdesk.application.dtos.notification import NotificationResult
from taskdesk.application.dtos.outcome import Outcome
from taskdesk.application.dtos.task import (
    TaskCreate,
    TaskDeletion,
    TaskDelta,
    TaskMutation,
    TaskPermissions,
)
from taskdesk.application.dtos.user import UserResult

__all__ = [
    "NotificationResult",
    "Outcome",
    "TaskCreate",
    "TaskDeletion",
    "TaskDelta",
    "TaskMutation",
    "TaskPermissions",
    "UserResult",
]
