"""Application interfaces (ports): repository and service protocols.

Define contracts for infrastructure implementations (DIP).
No runtime imports from taskdesk.infrastructure or taskdesk.api.
"""

from taskdesk.application.interfaces.repositories import (
    INotificationRepository,
    ITaskRepository,
    IUserRepository,
)
from taskdesk.application.interfaces.services import INotificationDispatcher

__all__ = [
    "INotificationDispatcher",
    "INotificationRepository",
    "ITaskRepository",
    "IUserRepository",
]
