"""Task domain entity.

Represents the business concept of a task, independent of persistence.
Tasks are immutable values: every change produces a new instance via
with_changes(), which keeps identity and tenancy fields fixed.
"""

from dataclasses import dataclass, replace
from datetime import datetime
from typing import Any

from taskdesk.domain.enums import ReviewStatus, TaskPriority, TaskStatus
from taskdesk.domain.exceptions import ValidationException

# Fields a delta may name. Everything else on the entity is owned by the
# creator, the tenancy boundary or persistence.
MUTABLE_FIELD_ORDER: tuple[str, ...] = (
    "title",
    "description",
    "status",
    "priority",
    "assigned_to_id",
    "due_date",
    "review_status",
)
MUTABLE_FIELDS: frozenset[str] = frozenset(MUTABLE_FIELD_ORDER)

IMMUTABLE_FIELDS: frozenset[str] = frozenset(
    {"id", "created_by_id", "institution_id", "created_at", "updated_at", "version"}
)


@dataclass(frozen=True)
class TaskEntity:
    """Immutable domain entity for a task.

    id is None until persistence assigns one. version is the optimistic-lock
    counter owned by the repository. Validation runs on construction.
    """

    id: int | None
    title: str
    description: str | None
    status: TaskStatus
    priority: TaskPriority
    assigned_to_id: int | None
    created_by_id: int
    institution_id: int
    due_date: datetime | None
    review_status: ReviewStatus
    created_at: datetime
    updated_at: datetime
    version: int = 1

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        """Validate task business rules. Raises ValidationException if invalid."""
        if not self.title or not self.title.strip():
            raise ValidationException("Title is required", field="title")
        if not self.created_by_id:
            raise ValidationException("Task must have a creator", field="created_by_id")
        if not self.institution_id:
            raise ValidationException(
                "Task must belong to an institution", field="institution_id"
            )
        if self.version < 1:
            raise ValidationException("Task version must be positive", field="version")

    def belongs_to_institution(self, institution_id: int) -> bool:
        """Return whether this task belongs to the given institution."""
        return self.institution_id == institution_id

    def with_changes(self, changes: dict[str, Any], updated_at: datetime) -> "TaskEntity":
        """Return a copy with changes applied and updated_at bumped.

        Raises:
            ValueError: If changes name a field outside MUTABLE_FIELDS.
        """
        unknown = set(changes) - MUTABLE_FIELDS
        if unknown:
            raise ValueError(f"Cannot change task fields: {sorted(unknown)}")
        return replace(self, **changes, updated_at=updated_at)
