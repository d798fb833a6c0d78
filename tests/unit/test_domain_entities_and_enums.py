"""Tests for domain entities (TaskEntity, ActorEntity, NotificationEvent) and enums."""

from dataclasses import FrozenInstanceError

import pytest

from taskdesk.domain.entities.notification import NotificationEvent
from taskdesk.domain.entities.task import (
    IMMUTABLE_FIELDS,
    MUTABLE_FIELD_ORDER,
    MUTABLE_FIELDS,
)
from taskdesk.domain.enums import (
    NotificationType,
    ReviewStatus,
    Role,
    TaskPriority,
    TaskStatus,
)
from taskdesk.domain.exceptions import ValidationException
from tests.factories import FIXED_NOW, make_actor, make_task


def test_enum_values() -> None:
    assert Role.values() == ["admin", "team", "guest"]
    assert TaskStatus.values() == ["todo", "in_progress", "review", "done"]
    assert TaskPriority.values() == ["low", "medium", "high", "urgent"]
    assert ReviewStatus.values() == ["pending", "approved", "rejected"]
    assert NotificationType.GUEST_TASK_CREATED.value == "GUEST_TASK_CREATED"


def test_task_requires_title() -> None:
    with pytest.raises(ValidationException) as excinfo:
        make_task(title="   ")
    assert excinfo.value.details == {"field": "title"}


def test_task_requires_positive_version() -> None:
    with pytest.raises(ValidationException):
        make_task(version=0)


def test_task_is_immutable() -> None:
    task = make_task()
    with pytest.raises(FrozenInstanceError):
        task.title = "Other"  # type: ignore[misc]


def test_with_changes_bumps_updated_at_only() -> None:
    task = make_task()
    later = FIXED_NOW.replace(hour=12)
    changed = task.with_changes({"title": "Reshoot"}, updated_at=later)
    assert changed.title == "Reshoot"
    assert changed.updated_at == later
    assert changed.created_at == task.created_at
    assert changed.version == task.version


def test_with_changes_rejects_immutable_fields() -> None:
    with pytest.raises(ValueError):
        make_task().with_changes({"created_by_id": 1}, updated_at=FIXED_NOW)


def test_mutable_and_immutable_fields_are_disjoint() -> None:
    assert not MUTABLE_FIELDS & IMMUTABLE_FIELDS


def test_mutable_field_order_has_each_mutable_field_once() -> None:
    assert len(MUTABLE_FIELD_ORDER) == len(MUTABLE_FIELDS)
    assert frozenset(MUTABLE_FIELD_ORDER) == MUTABLE_FIELDS


def test_task_helpers() -> None:
    task = make_task()
    assert task.belongs_to_institution(1)
    assert not task.belongs_to_institution(2)


def test_actor_rejects_unknown_role() -> None:
    with pytest.raises(ValidationException):
        make_actor(role="owner")  # type: ignore[arg-type]


def test_actor_name_falls_back_to_id() -> None:
    assert make_actor(id=4).name == "User 4"
    assert make_actor(display_name="Jane Smith").name == "Jane Smith"


def test_notification_event_for_task_binds_id() -> None:
    event = NotificationEvent(
        recipient_id=1,
        type=NotificationType.GUEST_TASK_CREATED,
        title="New task request",
        body="...",
        metadata={"task_id": None, "guest_id": 6},
    )
    bound = event.for_task(12)
    assert bound.task_id == 12
    assert bound.metadata["guest_id"] == 6
    assert event.task_id is None
