"""Discriminated result returned by the task workflow.

Expected failures (validation, authorization, not found) travel as a value
instead of an exception so callers can branch on them; unwrap() re-raises
for callers that let the exception handlers render the error.
"""

from __future__ import annotations

from dataclasses import dataclass

from taskdesk.domain.exceptions import TaskDeskException


@dataclass(frozen=True)
class Outcome[T]:
    """Either a value (ok) or a domain error, never both."""

    value: T | None = None
    error: TaskDeskException | None = None

    def __post_init__(self) -> None:
        if (self.value is None) == (self.error is None):
            raise ValueError("Outcome needs exactly one of value or error")

    @classmethod
    def success(cls, value: T) -> Outcome[T]:
        return cls(value=value)

    @classmethod
    def failure(cls, error: TaskDeskException) -> Outcome[T]:
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def error_code(self) -> str | None:
        """Machine-readable code of the error, or None on success."""
        return self.error.error_code if self.error is not None else None

    def unwrap(self) -> T:
        """Return the value, or raise the carried domain exception."""
        if self.error is not None:
            raise self.error
        return self.value
