"""Logging configuration for the application."""

import logging
import sys

from taskdesk.core.config import get_settings
from taskdesk.shared.context import get_current_actor_id, get_request_id

LOG_FORMAT = (
    "%(asctime)s - %(name)s - %(levelname)s - "
    "[request_id=%(request_id)s actor=%(actor_id)s] %(message)s"
)


class RequestContextFilter(logging.Filter):
    """Attach request_id and actor_id from the request context to each record."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = get_request_id() or "-"
        actor_id = get_current_actor_id()
        record.actor_id = actor_id if actor_id is not None else "-"
        return True


def setup_logging() -> None:
    """Configure application-wide logging.

    Level is DEBUG when settings.debug is True, otherwise settings.log_level.
    Output goes to stdout.
    """
    settings = get_settings()
    log_level = logging.DEBUG if settings.debug else getattr(logging, settings.log_level)
    handler = logging.StreamHandler(sys.stdout)
    handler.addFilter(RequestContextFilter())
    logging.basicConfig(
        level=log_level,
        format=LOG_FORMAT,
        handlers=[handler],
        force=True,
    )
