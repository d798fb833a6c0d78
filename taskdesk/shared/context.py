"""Request context management using contextvars.

Async-safe storage for request-scoped data used by logging: the request ID
(set by RequestIDMiddleware) and the acting user (set by the actor
dependency).
"""

from contextvars import ContextVar

_request_id: ContextVar[str | None] = ContextVar("request_id", default=None)
_current_actor_id: ContextVar[int | None] = ContextVar("current_actor_id", default=None)


def set_request_id(request_id: str | None) -> None:
    _request_id.set(request_id)


def get_request_id() -> str | None:
    """Return the current request ID, or None outside a request."""
    return _request_id.get()


def set_current_actor_id(actor_id: int | None) -> None:
    _current_actor_id.set(actor_id)


def get_current_actor_id() -> int | None:
    """Return the ID of the actor making the current request, or None."""
    return _current_actor_id.get()
