"""Task workflow: authorize task mutations and compute their effects.

Pure and synchronous. Given an actor, the current task and a requested
change, the workflow validates the request, consults the access policy and
returns the new task state plus the notification events the change fires.
It never reads or writes storage; the caller persists the task and dispatches
the notifications.

Every operation returns an Outcome. Updates are all-or-nothing: one
disallowed field rejects the whole delta.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from datetime import datetime
from enum import Enum
from typing import Any

from taskdesk.application.dtos.outcome import Outcome
from taskdesk.application.dtos.task import (
    TaskCreate,
    TaskDeletion,
    TaskMutation,
    TaskPermissions,
)
from taskdesk.application.services.access_policy import (
    allowed_status_targets,
    can_modify_entity,
    can_set_priority_or_assignment,
    can_set_review_status,
    can_transition_status,
)
from taskdesk.domain.entities.actor import ActorEntity
from taskdesk.domain.entities.notification import NotificationEvent
from taskdesk.domain.entities.task import IMMUTABLE_FIELDS, MUTABLE_FIELDS, TaskEntity
from taskdesk.domain.enums import (
    NotificationType,
    ReviewStatus,
    Role,
    TaskPriority,
    TaskStatus,
)
from taskdesk.domain.exceptions import (
    AuthorizationException,
    ResourceNotFoundException,
    StatusTransitionException,
    TaskDeskException,
    ValidationException,
)
from taskdesk.shared.utils.datetime import ensure_utc, parse_datetime_utc, utc_now

_RESTRICTED_TO_STAFF = ("priority", "assigned_to_id")
_DECISIONS = (ReviewStatus.APPROVED, ReviewStatus.REJECTED)


def _parse_enum[E: Enum](enum_cls: type[E], value: Any, field: str) -> E:
    """Return value as an enum member or raise ValidationException naming field."""
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(value)
    except ValueError:
        allowed = ", ".join(m.value for m in enum_cls)
        raise ValidationException(
            f"Invalid {field}: {value!r}. Expected one of: {allowed}", field=field
        ) from None


def _parse_title(value: Any) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValidationException("Title is required", field="title")
    return value


def _parse_description(value: Any) -> str | None:
    if value is not None and not isinstance(value, str):
        raise ValidationException("Description must be a string", field="description")
    return value


def _parse_due_date(value: Any) -> datetime | None:
    if value is None:
        return None
    if isinstance(value, datetime):
        return ensure_utc(value)
    if isinstance(value, str):
        try:
            return parse_datetime_utc(value)
        except ValueError:
            raise ValidationException(
                f"Malformed due date: {value!r}. Use ISO 8601.", field="due_date"
            ) from None
    raise ValidationException("Due date must be an ISO 8601 string", field="due_date")


def _parse_assignee(value: Any) -> int | None:
    if value is None:
        return None
    # bool is an int subclass; True is not a user id.
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise ValidationException(
            "assigned_to_id must be a positive integer or null", field="assigned_to_id"
        )
    return value


_FIELD_PARSERS: dict[str, Callable[[Any], Any]] = {
    "title": _parse_title,
    "description": _parse_description,
    "due_date": _parse_due_date,
    "assigned_to_id": _parse_assignee,
    "priority": lambda v: _parse_enum(TaskPriority, v, "priority"),
    "status": lambda v: _parse_enum(TaskStatus, v, "status"),
    "review_status": lambda v: _parse_enum(ReviewStatus, v, "review_status"),
}


def _parse_delta(delta: Mapping[str, Any]) -> dict[str, Any]:
    """Validate delta keys and values; return typed changes.

    Raises ValidationException before any authorization is considered.
    """
    changes: dict[str, Any] = {}
    for key, value in delta.items():
        if key in IMMUTABLE_FIELDS:
            raise ValidationException(f"Field '{key}' cannot be changed", field=key)
        if key not in MUTABLE_FIELDS:
            raise ValidationException(f"Unknown task field '{key}'", field=key)
        changes[key] = _FIELD_PARSERS[key](value)
    return changes


def _ensure_visible(actor: ActorEntity, task: TaskEntity | None) -> TaskEntity:
    """Return task if it exists in the actor's institution; else raise not found."""
    if task is None:
        raise ResourceNotFoundException("task", None)
    if not task.belongs_to_institution(actor.institution_id):
        raise ResourceNotFoundException("task", task.id)
    return task


def _require_modify(actor: ActorEntity, task: TaskEntity, action: str) -> None:
    if not can_modify_entity(actor, task.created_by_id):
        raise AuthorizationException(
            f"Only the task creator or an admin can {action} this task",
            rule="can_modify_entity",
        )


def _require_transition(
    actor: ActorEntity, task: TaskEntity, next_status: TaskStatus
) -> None:
    if not can_transition_status(actor, task.status, next_status):
        raise StatusTransitionException(
            actor.role.value, task.status.value, next_status.value
        )


def _authorize_changes(
    actor: ActorEntity, task: TaskEntity, changes: Mapping[str, Any]
) -> None:
    """Raise on the first change the actor may not make."""
    _require_modify(actor, task, "modify")
    for field in _RESTRICTED_TO_STAFF:
        if field in changes and not can_set_priority_or_assignment(actor):
            raise AuthorizationException(
                f"Role '{actor.role.value}' cannot set {field}",
                field=field,
                rule="can_set_priority_or_assignment",
            )
    next_status = changes.get("status")
    if next_status is not None and next_status != task.status:
        _require_transition(actor, task, next_status)
    review_status = changes.get("review_status")
    if review_status is not None and review_status != task.review_status:
        if not can_set_review_status(actor):
            raise AuthorizationException(
                "Only admins can change the review status",
                field="review_status",
                rule="can_set_review_status",
            )


def _guest_task_created_events(
    guest: ActorEntity, task: TaskEntity, admins: Iterable[ActorEntity]
) -> list[NotificationEvent]:
    """One GUEST_TASK_CREATED event per distinct admin of the guest's institution."""
    events: list[NotificationEvent] = []
    seen: set[int] = set()
    for admin in admins:
        if admin.role != Role.ADMIN or not admin.belongs_to_institution(guest.institution_id):
            continue
        if admin.id in seen:
            continue
        seen.add(admin.id)
        events.append(
            NotificationEvent(
                recipient_id=admin.id,
                type=NotificationType.GUEST_TASK_CREATED,
                title="New task request",
                body=f'{guest.name} submitted "{task.title}" for review.',
                metadata={
                    "task_id": task.id,
                    "guest_id": guest.id,
                    "guest_name": guest.name,
                },
            )
        )
    return events


def _review_decided_events(
    reviewer: ActorEntity, before: TaskEntity, after: TaskEntity
) -> list[NotificationEvent]:
    """Notify the creator when the review status changed to a decision."""
    if after.review_status == before.review_status or after.review_status not in _DECISIONS:
        return []
    decision = after.review_status.value
    return [
        NotificationEvent(
            recipient_id=before.created_by_id,
            type=NotificationType.TASK_REVIEW_DECIDED,
            title=f"Task {decision}",
            body=f'Your task "{after.title}" was {decision} by {reviewer.name}.',
            metadata={
                "task_id": after.id,
                "decision": decision,
                "reviewed_by_id": reviewer.id,
            },
        )
    ]


class TaskWorkflow:
    """Create, update and delete decisions for tasks.

    clock supplies timestamps (UTC); inject a fixed clock in tests.
    """

    def __init__(self, clock: Callable[[], datetime] = utc_now) -> None:
        self._clock = clock

    def create_task(
        self,
        actor: ActorEntity,
        data: TaskCreate,
        admins: Iterable[ActorEntity] = (),
    ) -> Outcome[TaskMutation]:
        """Build a new task for actor; guests get a forced pending review.

        admins is the caller-supplied roster of the institution's admins; only
        guest submissions notify them.
        """
        try:
            task = self._build_task(actor, data)
        except TaskDeskException as exc:
            return Outcome.failure(exc)
        notifications: list[NotificationEvent] = []
        if actor.role == Role.GUEST:
            notifications = _guest_task_created_events(actor, task, admins)
        return Outcome.success(TaskMutation(task=task, notifications=notifications))

    def update_task(
        self,
        actor: ActorEntity,
        task: TaskEntity | None,
        delta: Mapping[str, Any],
    ) -> Outcome[TaskMutation]:
        """Apply a sparse delta to task if every changed field is permitted."""
        try:
            current = _ensure_visible(actor, task)
            changes = _parse_delta(delta)
            _authorize_changes(actor, current, changes)
            updated = current.with_changes(changes, updated_at=self._clock())
        except TaskDeskException as exc:
            return Outcome.failure(exc)
        notifications = _review_decided_events(actor, current, updated)
        return Outcome.success(TaskMutation(task=updated, notifications=notifications))

    def delete_task(
        self, actor: ActorEntity, task: TaskEntity | None
    ) -> Outcome[TaskDeletion]:
        """Authorize deletion; the caller removes the task. No notifications."""
        try:
            current = _ensure_visible(actor, task)
            _require_modify(actor, current, "delete")
        except TaskDeskException as exc:
            return Outcome.failure(exc)
        return Outcome.success(TaskDeletion(task_id=current.id))

    def change_status(
        self, actor: ActorEntity, task: TaskEntity | None, status: Any
    ) -> Outcome[TaskMutation]:
        """Move task along the board.

        Gated by the transition table alone: any team member or admin of the
        institution may move a task, not only its creator. Guests never can.
        Re-sending the current status is a no-op for team and admin.
        """
        try:
            current = _ensure_visible(actor, task)
            next_status = _parse_enum(TaskStatus, status, "status")
            if next_status != current.status or actor.role == Role.GUEST:
                _require_transition(actor, current, next_status)
            updated = current.with_changes(
                {"status": next_status}, updated_at=self._clock()
            )
        except TaskDeskException as exc:
            return Outcome.failure(exc)
        return Outcome.success(TaskMutation(task=updated))

    def decide_review(
        self, actor: ActorEntity, task: TaskEntity | None, review_status: Any
    ) -> Outcome[TaskMutation]:
        return self.update_task(actor, task, {"review_status": review_status})

    def assign(
        self, actor: ActorEntity, task: TaskEntity | None, assigned_to_id: Any
    ) -> Outcome[TaskMutation]:
        return self.update_task(actor, task, {"assigned_to_id": assigned_to_id})

    def describe_permissions(
        self, actor: ActorEntity, task: TaskEntity | None
    ) -> Outcome[TaskPermissions]:
        """Return what actor may do to task, for pre-flight UI checks."""
        try:
            current = _ensure_visible(actor, task)
        except TaskDeskException as exc:
            return Outcome.failure(exc)
        can_edit = can_modify_entity(actor, current.created_by_id)
        staff = can_set_priority_or_assignment(actor)
        return Outcome.success(
            TaskPermissions(
                task_id=current.id,
                can_edit=can_edit,
                can_delete=can_edit,
                can_set_priority=can_edit and staff,
                can_assign=can_edit and staff,
                can_review=can_edit and can_set_review_status(actor),
                allowed_status_targets=[
                    s.value for s in allowed_status_targets(actor, current.status)
                ],
            )
        )

    def _build_task(self, actor: ActorEntity, data: TaskCreate) -> TaskEntity:
        title = _parse_title(data.title)
        description = _parse_description(data.description)
        due_date = _parse_due_date(data.due_date)
        institution_id = (
            data.institution_id if data.institution_id is not None else actor.institution_id
        )
        if not actor.belongs_to_institution(institution_id):
            raise AuthorizationException(
                "Tasks can only be created in the actor's institution",
                field="institution_id",
                rule="same_institution",
            )
        if actor.role == Role.GUEST:
            priority = TaskPriority.MEDIUM
            assigned_to_id = None
            review_status = ReviewStatus.PENDING
        else:
            priority = (
                _parse_enum(TaskPriority, data.priority, "priority")
                if data.priority is not None
                else TaskPriority.MEDIUM
            )
            assigned_to_id = _parse_assignee(data.assigned_to_id)
            review_status = ReviewStatus.APPROVED
        now = self._clock()
        return TaskEntity(
            id=None,
            title=title,
            description=description,
            status=TaskStatus.TODO,
            priority=priority,
            assigned_to_id=assigned_to_id,
            created_by_id=actor.id,
            institution_id=institution_id,
            due_date=due_date,
            review_status=review_status,
            created_at=now,
            updated_at=now,
        )
