"""Tests for domain exceptions (error_code, message, details, to_dict)."""

from taskdesk.domain.exceptions import (
    AuthenticationException,
    AuthorizationException,
    ResourceNotFoundException,
    StatusTransitionException,
    TaskDeskException,
    TaskVersionConflictException,
    ValidationException,
)


def test_base_exception_default_error_code() -> None:
    """Base TaskDeskException uses class name as error_code when not provided."""
    exc = TaskDeskException("Something failed")
    assert exc.message == "Something failed"
    assert exc.error_code == "TaskDeskException"
    assert exc.details == {}


def test_to_dict() -> None:
    exc = TaskDeskException("Oops", error_code="CUSTOM", details={"key": "value"})
    assert exc.to_dict() == {
        "error": "CUSTOM",
        "message": "Oops",
        "details": {"key": "value"},
    }


def test_validation_exception() -> None:
    exc = ValidationException("Title is required", field="title")
    assert exc.error_code == "VALIDATION_ERROR"
    assert exc.details == {"field": "title"}


def test_validation_exception_without_field() -> None:
    assert ValidationException("Bad input").details == {}


def test_authentication_exception() -> None:
    exc = AuthenticationException()
    assert exc.error_code == "AUTHENTICATION_ERROR"
    assert exc.message == "Authentication failed"


def test_authorization_exception_field_and_rule() -> None:
    exc = AuthorizationException("No", field="priority", rule="can_set_priority_or_assignment")
    assert exc.error_code == "FORBIDDEN"
    assert exc.details == {"field": "priority", "rule": "can_set_priority_or_assignment"}


def test_status_transition_exception() -> None:
    exc = StatusTransitionException("team", "done", "todo")
    assert isinstance(exc, AuthorizationException)
    assert exc.error_code == "FORBIDDEN"
    assert "'done' to 'todo'" in exc.message
    assert exc.details == {
        "field": "status",
        "rule": "can_transition_status",
        "current_status": "done",
        "next_status": "todo",
    }


def test_resource_not_found_exception() -> None:
    exc = ResourceNotFoundException("task", 42)
    assert exc.error_code == "RESOURCE_NOT_FOUND"
    assert exc.details == {"resource_type": "task", "resource_id": 42}
    assert "42" in exc.message


def test_task_version_conflict_exception() -> None:
    exc = TaskVersionConflictException(10, 3)
    assert exc.error_code == "TASK_VERSION_CONFLICT"
    assert exc.details == {"task_id": 10, "attempts": 3}
