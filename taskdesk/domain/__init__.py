"""Domain layer: entities, enums, and exceptions.

No dependencies on infrastructure or presentation. Used by application
and infrastructure layers.
"""

from taskdesk.domain.entities import ActorEntity, NotificationEvent, TaskEntity
from taskdesk.domain.enums import (
    NotificationType,
    ReviewStatus,
    Role,
    TaskPriority,
    TaskStatus,
)
from taskdesk.domain.exceptions import (
    AuthenticationException,
    AuthorizationException,
    ResourceNotFoundException,
    StatusTransitionException,
    TaskDeskException,
    TaskVersionConflictException,
    ValidationException,
)

__all__ = [
    # Entities
    "ActorEntity",
    "NotificationEvent",
    "TaskEntity",
    # Enums
    "NotificationType",
    "ReviewStatus",
    "Role",
    "TaskPriority",
    "TaskStatus",
    # Exceptions
    "AuthenticationException",
    "AuthorizationException",
    "ResourceNotFoundException",
    "StatusTransitionException",
    "TaskDeskException",
    "TaskVersionConflictException",
    "ValidationException",
]
