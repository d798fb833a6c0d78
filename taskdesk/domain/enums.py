"""Domain enumerations for taskdesk.

Closed sets of domain values: actor roles, task lifecycle status, priority,
review status and notification types. Stored and transmitted as their
string values.
"""

from enum import Enum


class _ValuesMixin:
    """Mixin that adds a values() classmethod to str Enums."""

    @classmethod
    def values(cls) -> list[str]:
        """Return all valid values as strings."""
        return [member.value for member in cls]


class Role(_ValuesMixin, str, Enum):
    """Actor role within an institution."""

    ADMIN = "admin"
    TEAM = "team"
    GUEST = "guest"


class TaskStatus(_ValuesMixin, str, Enum):
    """Task lifecycle status (workflow column)."""

    TODO = "todo"
    IN_PROGRESS = "in_progress"
    REVIEW = "review"
    DONE = "done"


class TaskPriority(_ValuesMixin, str, Enum):
    """Task priority."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    URGENT = "urgent"


class ReviewStatus(_ValuesMixin, str, Enum):
    """Admin sign-off state, separate from the workflow status.

    Guest-submitted tasks start PENDING; everything else starts APPROVED.
    """

    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


class NotificationType(_ValuesMixin, str, Enum):
    """Type tag of a notification fanned out by the task workflow."""

    GUEST_TASK_CREATED = "GUEST_TASK_CREATED"
    TASK_REVIEW_DECIDED = "TASK_REVIEW_DECIDED"
