"""Repository interfaces (ports) for the application layer.

Protocols define contracts that infrastructure implementations must fulfill (DIP).
All types reference domain entities or application DTOs only; no
infrastructure imports.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from taskdesk.application.dtos.notification import NotificationResult
    from taskdesk.application.dtos.user import UserResult
    from taskdesk.domain.entities.task import TaskEntity
    from taskdesk.domain.enums import ReviewStatus, TaskStatus


class ITaskRepository(Protocol):
    """Protocol for task persistence."""

    async def get_task(self, task_id: int) -> TaskEntity | None:
        """Return task by ID, or None."""

    async def add_task(self, task: TaskEntity) -> TaskEntity:
        """Insert a new task; return it with id, timestamps and version assigned."""

    async def save_task(
        self, task: TaskEntity, expected_version: int
    ) -> TaskEntity | None:
        """Write task only if the stored version still equals expected_version.

        Returns the saved task (version bumped), or None when another request
        won the race.
        """

    async def delete_task(self, task_id: int) -> bool:
        """Delete task; return whether a row was removed."""

    async def list_tasks(
        self,
        institution_id: int,
        status: TaskStatus | None = None,
        review_status: ReviewStatus | None = None,
        limit: int = 100,
    ) -> list[TaskEntity]:
        """Return institution tasks, newest first."""


class IUserRepository(Protocol):
    """Protocol for user lookups."""

    async def get_by_id(self, user_id: int) -> UserResult | None:
        """Return user by ID, or None."""

    async def list_admins(self, institution_id: int) -> list[UserResult]:
        """Return all admin users of the institution."""


class INotificationRepository(Protocol):
    """Protocol for stored notifications."""

    async def create_notification(
        self,
        user_id: int,
        type: str,
        title: str,
        message: str,
        metadata: dict[str, Any] | None = None,
    ) -> NotificationResult:
        """Insert an unread notification."""

    async def get_for_user(
        self, notification_id: int, user_id: int
    ) -> NotificationResult | None:
        """Return the notification only if it belongs to user_id."""

    async def list_for_user(
        self,
        user_id: int,
        read: bool | None = None,
        limit: int = 10,
        offset: int = 0,
    ) -> list[NotificationResult]:
        """Return the user's notifications, newest first."""

    async def set_read(
        self, notification_id: int, read: bool
    ) -> NotificationResult | None:
        """Set the read flag; return the updated notification or None."""

    async def delete_notification(self, notification_id: int) -> bool:
        """Delete notification; return whether a row was removed."""
