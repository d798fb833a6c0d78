"""Domain entities and values.

Pure domain models; no ORM or persistence concerns.
"""

from taskdesk.domain.entities.actor import ActorEntity
from taskdesk.domain.entities.notification import NotificationEvent
from taskdesk.domain.entities.task import TaskEntity

__all__ = [
    "ActorEntity",
    "NotificationEvent",
    "TaskEntity",
]
