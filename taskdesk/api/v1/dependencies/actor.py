"""Actor identity dependency.

The caller's identity arrives in trusted headers set by the gateway in front
of the API. Missing or malformed identity headers are an authentication error.
"""

from __future__ import annotations

from fastapi import Request

from taskdesk.domain.entities.actor import ActorEntity
from taskdesk.domain.enums import Role
from taskdesk.domain.exceptions import AuthenticationException
from taskdesk.shared.context import set_current_actor_id

USER_ID_HEADER = "X-User-ID"
USER_ROLE_HEADER = "X-User-Role"
INSTITUTION_ID_HEADER = "X-Institution-ID"
USER_NAME_HEADER = "X-User-Name"


def _positive_int_header(request: Request, name: str) -> int:
    value = (request.headers.get(name) or "").strip()
    if not value:
        raise AuthenticationException(f"Missing required header: {name}")
    # Headers decode as Latin-1, where str.isdigit() also accepts superscripts.
    if not (value.isascii() and value.isdigit()) or int(value) <= 0:
        raise AuthenticationException(f"Invalid {name} header")
    return int(value)


async def get_current_actor(request: Request) -> ActorEntity:
    """Build the acting user from identity headers and bind it to the log context."""
    user_id = _positive_int_header(request, USER_ID_HEADER)
    institution_id = _positive_int_header(request, INSTITUTION_ID_HEADER)
    raw_role = (request.headers.get(USER_ROLE_HEADER) or "").strip().lower()
    if not raw_role:
        raise AuthenticationException(f"Missing required header: {USER_ROLE_HEADER}")
    if raw_role not in Role.values():
        raise AuthenticationException(f"Invalid {USER_ROLE_HEADER} header")
    name = (request.headers.get(USER_NAME_HEADER) or "").strip() or None
    set_current_actor_id(user_id)
    return ActorEntity(
        id=user_id,
        role=Role(raw_role),
        institution_id=institution_id,
        display_name=name,
    )
