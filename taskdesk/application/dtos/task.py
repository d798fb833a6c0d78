"""DTOs for task operations (no dependency on ORM)."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from taskdesk.domain.entities.notification import NotificationEvent
from taskdesk.domain.entities.task import MUTABLE_FIELD_ORDER, TaskEntity


@dataclass(frozen=True)
class TaskCreate:
    """Create-task input as supplied by the caller.

    Enum-valued fields are raw strings here; the workflow validates them.
    institution_id defaults to the actor's institution.
    """

    title: str
    description: str | None = None
    priority: str | None = None
    assigned_to_id: int | None = None
    due_date: datetime | str | None = None
    institution_id: int | None = None


@dataclass(frozen=True)
class TaskMutation:
    """Result of a create or update: the new task plus notifications to dispatch."""

    task: TaskEntity
    notifications: list[NotificationEvent] = field(default_factory=list)

    def changed_fields(self, previous: TaskEntity) -> list[str]:
        """Return mutable field names whose value differs from previous."""
        return [
            f
            for f in MUTABLE_FIELD_ORDER
            if getattr(previous, f) != getattr(self.task, f)
        ]


@dataclass(frozen=True)
class TaskDeletion:
    """Result of an authorized delete: the caller removes task_id."""

    task_id: int | None


@dataclass(frozen=True)
class TaskPermissions:
    """Pre-flight answers for one actor on one task (UI enable/disable)."""

    task_id: int | None
    can_edit: bool
    can_delete: bool
    can_set_priority: bool
    can_assign: bool
    can_review: bool
    allowed_status_targets: list[str]


TaskDelta = dict[str, Any]
