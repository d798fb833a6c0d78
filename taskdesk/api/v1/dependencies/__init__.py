"""Presentation-layer dependency injection (composition root).

Routes depend only on these dependencies, not on infrastructure directly.
"""

from taskdesk.api.v1.dependencies.actor import get_current_actor
from taskdesk.api.v1.dependencies.task import (
    get_notification_service,
    get_notification_service_for_write,
    get_task_service,
    get_task_service_for_write,
)

__all__ = [
    "get_current_actor",
    "get_notification_service",
    "get_notification_service_for_write",
    "get_task_service",
    "get_task_service_for_write",
]
