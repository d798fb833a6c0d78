"""Shared utilities: datetime."""

from taskdesk.shared.utils.datetime import ensure_utc, parse_datetime_utc, utc_now

__all__ = ["ensure_utc", "parse_datetime_utc", "utc_now"]
