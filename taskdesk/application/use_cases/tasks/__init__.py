"""Task use cases."""

from taskdesk.application.use_cases.tasks.task_operations import TaskService
from taskdesk.application.use_cases.tasks.task_workflow import TaskWorkflow

__all__ = [
    "TaskService",
    "TaskWorkflow",
]
