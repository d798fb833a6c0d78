"""Tests for Outcome (success/failure result of the task workflow)."""

import pytest

from taskdesk.application.dtos.outcome import Outcome
from taskdesk.domain.exceptions import ResourceNotFoundException


def test_success() -> None:
    outcome = Outcome.success(5)
    assert outcome.ok
    assert outcome.error_code is None
    assert outcome.unwrap() == 5


def test_failure_unwrap_raises() -> None:
    error = ResourceNotFoundException("task", 1)
    outcome = Outcome.failure(error)
    assert not outcome.ok
    assert outcome.error_code == "RESOURCE_NOT_FOUND"
    with pytest.raises(ResourceNotFoundException):
        outcome.unwrap()


def test_requires_exactly_one_side() -> None:
    with pytest.raises(ValueError):
        Outcome()
    with pytest.raises(ValueError):
        Outcome(value=1, error=ResourceNotFoundException("task", 1))
