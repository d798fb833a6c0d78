"""Domain exceptions for taskdesk.

Defines domain-level exceptions that represent business rule violations.
These exceptions are independent of infrastructure concerns. The task
workflow returns them inside an Outcome; the presentation layer maps them to
HTTP responses in exception handlers.
"""

from typing import Any


class TaskDeskException(Exception):
    """Base exception for all taskdesk errors.

    All custom exceptions inherit from this class to allow consistent error
    handling and logging. Presentation layer maps these to HTTP responses
    using message, error_code, and details.

    Attributes:
        message: Human-readable error description.
        error_code: Machine-readable error code.
        details: Additional error context (e.g. field, rule, resource_id).
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description.
            error_code: Optional machine-readable code; defaults to class name.
            details: Optional dict of extra context.
        """
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON error body used by the HTTP layer."""
        return {
            "error": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class ValidationException(TaskDeskException):
    """Raised when input is malformed (empty title, unknown enum value, bad date)."""

    def __init__(self, message: str, field: str | None = None) -> None:
        """Initialize with message and optional field name.

        Args:
            message: Description of the validation failure.
            field: Optional field that failed validation.
        """
        details = {"field": field} if field else {}
        super().__init__(message, "VALIDATION_ERROR", details)


class AuthenticationException(TaskDeskException):
    """Raised when the caller-supplied identity is missing or malformed."""

    def __init__(self, message: str = "Authentication failed") -> None:
        super().__init__(message, "AUTHENTICATION_ERROR")


class AuthorizationException(TaskDeskException):
    """Raised when a well-formed request is not permitted for the actor."""

    def __init__(
        self,
        message: str = "Permission denied",
        field: str | None = None,
        rule: str | None = None,
        **details_extra: Any,
    ) -> None:
        """Initialize with message and the field/rule that denied the request.

        Args:
            message: Human-readable message.
            field: Optional task field the actor may not set.
            rule: Optional name of the policy rule that failed
                (e.g. 'can_modify_entity').
            **details_extra: Optional keys merged into details.
        """
        details: dict[str, Any] = {}
        if field:
            details["field"] = field
        if rule:
            details["rule"] = rule
        details.update(details_extra)
        super().__init__(message, "FORBIDDEN", details)


class StatusTransitionException(AuthorizationException):
    """Raised when the actor's role cannot move a task between two statuses."""

    def __init__(self, role: str, current_status: str, next_status: str) -> None:
        super().__init__(
            f"Role '{role}' cannot move a task from '{current_status}' to '{next_status}'",
            field="status",
            rule="can_transition_status",
            current_status=current_status,
            next_status=next_status,
        )


class ResourceNotFoundException(TaskDeskException):
    """Raised when a requested resource is not found."""

    def __init__(self, resource_type: str, resource_id: Any) -> None:
        """Initialize with resource type and id.

        Args:
            resource_type: Type of resource (e.g. 'task', 'notification').
            resource_id: The ID that was not found (None when unknown).
        """
        super().__init__(
            f"{resource_type} not found: {resource_id}",
            "RESOURCE_NOT_FOUND",
            {"resource_type": resource_type, "resource_id": resource_id},
        )


class TaskVersionConflictException(TaskDeskException):
    """Raised when concurrent requests kept winning the task write (optimistic lock)."""

    def __init__(self, task_id: int, attempts: int) -> None:
        super().__init__(
            "Task was updated by another request; retry.",
            "TASK_VERSION_CONFLICT",
            {"task_id": task_id, "attempts": attempts},
        )
