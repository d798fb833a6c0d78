"""Application use cases: one entry point per workflow."""

from taskdesk.application.use_cases.notifications import NotificationService
from taskdesk.application.use_cases.tasks import TaskService, TaskWorkflow

__all__ = [
    "NotificationService",
    "TaskService",
    "TaskWorkflow",
]
