"""Application services: access policy predicates."""

from taskdesk.application.services.access_policy import (
    TEAM_STATUS_TRANSITIONS,
    allowed_status_targets,
    can_modify_entity,
    can_set_priority_or_assignment,
    can_set_review_status,
    can_transition_status,
    is_admin,
)

__all__ = [
    "TEAM_STATUS_TRANSITIONS",
    "allowed_status_targets",
    "can_modify_entity",
    "can_set_priority_or_assignment",
    "can_set_review_status",
    "can_transition_status",
    "is_admin",
]
