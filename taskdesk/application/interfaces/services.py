"""Service interfaces (ports) for the application layer."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from taskdesk.domain.entities.notification import NotificationEvent


class INotificationDispatcher(Protocol):
    """Protocol for notification delivery.

    The workflow only describes events; ordering, retries and delivery
    guarantees belong to the implementation.
    """

    async def dispatch(self, events: list[NotificationEvent]) -> None:
        """Hand off events for delivery."""
