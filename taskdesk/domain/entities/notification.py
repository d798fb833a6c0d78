"""NotificationEvent domain value.

An outbound fan-out message computed by the task workflow. Not persisted by
the core; the caller hands it to a dispatcher and its lifecycle ends there.
"""

from dataclasses import dataclass, field, replace
from typing import Any

from taskdesk.domain.enums import NotificationType


@dataclass(frozen=True)
class NotificationEvent:
    """Immutable description of one notification to one recipient."""

    recipient_id: int
    type: NotificationType
    title: str
    body: str
    metadata: dict[str, Any] = field(default_factory=dict)

    @property
    def task_id(self) -> int | None:
        """Id of the task that triggered the event, when known."""
        return self.metadata.get("task_id")

    def for_task(self, task_id: int) -> "NotificationEvent":
        """Return a copy whose metadata points at the persisted task id."""
        return replace(self, metadata={**self.metadata, "task_id": task_id})
