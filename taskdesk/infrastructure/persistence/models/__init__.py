"""ORM models; importing this package registers every table on Base.metadata."""

from taskdesk.infrastructure.persistence.models.notification import Notification
from taskdesk.infrastructure.persistence.models.task import Task
from taskdesk.infrastructure.persistence.models.user import User

__all__ = [
    "Notification",
    "Task",
    "User",
]
