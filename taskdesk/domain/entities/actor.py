"""Actor domain entity.

The identity making a request, supplied by the (trusted) caller.
"""

from dataclasses import dataclass

from taskdesk.domain.enums import Role
from taskdesk.domain.exceptions import ValidationException


@dataclass(frozen=True)
class ActorEntity:
    """Immutable identity for the duration of a request."""

    id: int
    role: Role
    institution_id: int
    display_name: str | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.role, Role):
            raise ValidationException(f"Unknown role: {self.role!r}", field="role")

    def belongs_to_institution(self, institution_id: int) -> bool:
        """Return whether the actor is a member of the given institution."""
        return self.institution_id == institution_id

    @property
    def name(self) -> str:
        """Display name, falling back to a user reference."""
        return self.display_name or f"User {self.id}"
