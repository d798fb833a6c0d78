"""Pydantic request/response schemas for the API."""

from taskdesk.schemas.health import HealthResponse
from taskdesk.schemas.notification import NotificationResponse
from taskdesk.schemas.task import (
    TaskAssignRequest,
    TaskCreateRequest,
    TaskPermissionsResponse,
    TaskResponse,
    TaskReviewRequest,
    TaskStatusRequest,
    TaskUpdateRequest,
)

__all__ = [
    "HealthResponse",
    "NotificationResponse",
    "TaskAssignRequest",
    "TaskCreateRequest",
    "TaskPermissionsResponse",
    "TaskResponse",
    "TaskReviewRequest",
    "TaskStatusRequest",
    "TaskUpdateRequest",
]
