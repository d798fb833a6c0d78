"""Task API schemas.

Enum-valued request fields are plain strings; the task workflow validates
them so an unknown status or priority is reported as a domain validation
error (400) naming the field.
"""

from typing import Any

from pydantic import AwareDatetime, BaseModel, ConfigDict, Field

from taskdesk.domain.enums import ReviewStatus, TaskPriority, TaskStatus


class TaskCreateRequest(BaseModel):
    """Payload for creating a task. Guests may not set priority or assignee."""

    title: str = Field(..., max_length=500)
    description: str | None = None
    priority: str | None = Field(default=None, description="low, medium, high or urgent")
    assigned_to_id: int | None = None
    due_date: str | None = Field(default=None, description="ISO 8601 timestamp")
    institution_id: int | None = Field(
        default=None, description="Defaults to the caller's institution"
    )


class TaskUpdateRequest(BaseModel):
    """Sparse update: only the fields present in the body are applied.

    Unknown or immutable fields are passed through and rejected by the workflow.
    """

    model_config = ConfigDict(extra="allow")

    title: str | None = None
    description: str | None = None
    status: str | None = None
    priority: str | None = None
    assigned_to_id: int | None = None
    due_date: str | None = None
    review_status: str | None = None

    def to_delta(self) -> dict[str, Any]:
        """Return only the fields the client sent (including extras)."""
        return self.model_dump(exclude_unset=True)


class TaskStatusRequest(BaseModel):
    """Move a task to another workflow status."""

    status: str


class TaskReviewRequest(BaseModel):
    """Admin review decision: approved, rejected or pending."""

    review_status: str


class TaskAssignRequest(BaseModel):
    """Assign the task to a user, or unassign with null."""

    assigned_to_id: int | None = None


class TaskResponse(BaseModel):
    """Task as returned by the API."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    description: str | None = None
    status: TaskStatus
    priority: TaskPriority
    review_status: ReviewStatus
    assigned_to_id: int | None = None
    created_by_id: int
    institution_id: int
    due_date: AwareDatetime | None = None
    created_at: AwareDatetime
    updated_at: AwareDatetime
    version: int


class TaskPermissionsResponse(BaseModel):
    """What the caller may do to one task (UI pre-flight)."""

    model_config = ConfigDict(from_attributes=True)

    task_id: int
    can_edit: bool
    can_delete: bool
    can_set_priority: bool
    can_assign: bool
    can_review: bool
    allowed_status_targets: list[str]
