"""Access policy: pure predicates over (actor, task, requested change).

No side effects and no exceptions; every predicate returns a bool. Callers
use them for authorization inside the task workflow and individually for
pre-flight checks (e.g. disabling a button before submission).
"""

from __future__ import annotations

from taskdesk.domain.entities.actor import ActorEntity
from taskdesk.domain.enums import Role, TaskStatus

# (current, next) pairs a team member may move a task along. Nothing leaves
# DONE without an admin.
TEAM_STATUS_TRANSITIONS: frozenset[tuple[TaskStatus, TaskStatus]] = frozenset(
    {
        (TaskStatus.TODO, TaskStatus.IN_PROGRESS),
        (TaskStatus.IN_PROGRESS, TaskStatus.REVIEW),
        (TaskStatus.IN_PROGRESS, TaskStatus.TODO),
        (TaskStatus.REVIEW, TaskStatus.DONE),
        (TaskStatus.REVIEW, TaskStatus.IN_PROGRESS),
    }
)


def is_admin(actor: ActorEntity) -> bool:
    """Return True iff the actor is an admin."""
    return actor.role == Role.ADMIN


def can_modify_entity(actor: ActorEntity, creator_id: int) -> bool:
    """Return True if the actor created the resource or is an admin.

    Gates delete and general field edits (title, description, due date).
    """
    return actor.id == creator_id or is_admin(actor)


def can_set_priority_or_assignment(actor: ActorEntity) -> bool:
    """Return True unless the actor is a guest."""
    return actor.role != Role.GUEST


def can_set_review_status(actor: ActorEntity) -> bool:
    """Only admins decide reviews."""
    return is_admin(actor)


def can_transition_status(
    actor: ActorEntity, current_status: TaskStatus, next_status: TaskStatus
) -> bool:
    """Return whether the actor's role may move a task from current to next status.

    Admins may make any move, guests none; team members only the moves in
    TEAM_STATUS_TRANSITIONS.
    """
    if actor.role == Role.ADMIN:
        return True
    if actor.role == Role.TEAM:
        return (current_status, next_status) in TEAM_STATUS_TRANSITIONS
    return False


def allowed_status_targets(
    actor: ActorEntity, current_status: TaskStatus
) -> list[TaskStatus]:
    """Return the statuses the actor may move a task to from current_status.

    Same-status moves are omitted; they are not transitions.
    """
    return [
        status
        for status in TaskStatus
        if status != current_status
        and can_transition_status(actor, current_status, status)
    ]
