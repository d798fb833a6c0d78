"""DTOs for users (no dependency on ORM)."""

from __future__ import annotations

from dataclasses import dataclass

from taskdesk.domain.entities.actor import ActorEntity
from taskdesk.domain.enums import Role


@dataclass(frozen=True)
class UserResult:
    """User read-model."""

    id: int
    email: str
    full_name: str
    role: Role
    institution_id: int

    def to_actor(self) -> ActorEntity:
        """Return the actor identity for this user."""
        return ActorEntity(
            id=self.id,
            role=self.role,
            institution_id=self.institution_id,
            display_name=self.full_name,
        )
