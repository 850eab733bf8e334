"""Tests for the activity payload validators."""

from __future__ import annotations

import pytest

from app.application.use_cases.activities.validators import (
    ensure_required_fields,
    ensure_valid_date,
    ensure_valid_duration,
    validate_activity_changes,
    validate_new_activity,
)
from app.domain.exceptions import InvalidInput


def _payload(**overrides):
    payload = {
        "activity_type": "event",
        "description": "Morning run",
        "date": "2024-05-01",
        "time": "10:00",
        "duration": "60",
    }
    payload.update(overrides)
    return payload


def test_validate_new_activity_returns_fields_in_order():
    assert validate_new_activity(_payload()) == _payload()


@pytest.mark.parametrize(
    "field", ["activity_type", "description", "date", "time", "duration"]
)
def test_required_fields_reject_empty_values(field):
    with pytest.raises(InvalidInput) as exc_info:
        ensure_required_fields(_payload(**{field: ""}))

    assert field in str(exc_info.value)


def test_required_fields_reject_missing_and_blank_values():
    payload = _payload(description="   ")
    del payload["time"]

    with pytest.raises(InvalidInput) as exc_info:
        ensure_required_fields(payload)

    assert "description" in str(exc_info.value)
    assert "time" in str(exc_info.value)


@pytest.mark.parametrize("value", ["2024-5-01", "01-05-2024", "2024/05/01", "2024-05-01T10", ""])
def test_ensure_valid_date_rejects_malformed_values(value):
    with pytest.raises(InvalidInput):
        ensure_valid_date(value)


def test_ensure_valid_date_checks_syntax_only():
    assert ensure_valid_date("2024-13-40") == "2024-13-40"


@pytest.mark.parametrize("value", ["0", "-5", "abc", "1.5", "10 min", "+5", "000"])
def test_ensure_valid_duration_rejects_non_positive_or_non_numeric(value):
    with pytest.raises(InvalidInput):
        ensure_valid_duration(value)


def test_ensure_valid_duration_accepts_positive_integers():
    assert ensure_valid_duration("1") == "1"
    assert ensure_valid_duration("090") == "090"


def test_ensure_valid_duration_handles_very_long_digit_strings():
    long_duration = "1" * 5000

    assert ensure_valid_duration(long_duration) == long_duration
    with pytest.raises(InvalidInput):
        ensure_valid_duration("0" * 5000)


def test_validate_activity_changes_only_checks_present_fields():
    validate_activity_changes({"description": "New text"})

    with pytest.raises(InvalidInput):
        validate_activity_changes({"date": "tomorrow"})
    with pytest.raises(InvalidInput):
        validate_activity_changes({"duration": "0"})
    with pytest.raises(InvalidInput):
        validate_activity_changes({"time": ""})
