"""Common validation helpers for activity use cases."""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Final

from app.domain.entities import ACTIVITY_PAYLOAD_FIELDS
from app.domain.exceptions import InvalidInput

INVALID_PAYLOAD_MESSAGE: Final[str] = "Invalid Payload"

# Syntax only: "2024-13-40" is accepted.
_DATE_PATTERN: Final[re.Pattern[str]] = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")
_DURATION_PATTERN: Final[re.Pattern[str]] = re.compile(r"[0-9]+")


def _is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


def ensure_required_fields(payload: Mapping[str, str | None]) -> dict[str, str]:
    """Return the payload fields or raise ``InvalidInput`` if any is empty."""

    missing = [name for name in ACTIVITY_PAYLOAD_FIELDS if _is_blank(payload.get(name))]
    if missing:
        raise InvalidInput(f"{INVALID_PAYLOAD_MESSAGE}: missing {', '.join(missing)}")
    return {name: payload[name] for name in ACTIVITY_PAYLOAD_FIELDS}  # type: ignore[misc]


def ensure_valid_date(value: str) -> str:
    """Return ``value`` when it looks like ``YYYY-MM-DD``."""

    if _DATE_PATTERN.fullmatch(value) is None:
        raise InvalidInput(f"{INVALID_PAYLOAD_MESSAGE}: date must use the YYYY-MM-DD format")
    return value


def ensure_valid_duration(value: str) -> str:
    """Return ``value`` when it encodes a positive number of minutes."""

    if _DURATION_PATTERN.fullmatch(value) is None or not value.lstrip("0"):
        raise InvalidInput(
            f"{INVALID_PAYLOAD_MESSAGE}: duration must be a positive whole number of minutes"
        )
    return value


def validate_new_activity(payload: Mapping[str, str | None]) -> dict[str, str]:
    """Run every creation check and return the normalized payload."""

    fields = ensure_required_fields(payload)
    ensure_valid_date(fields["date"])
    ensure_valid_duration(fields["duration"])
    return fields


def validate_activity_changes(changes: Mapping[str, str]) -> None:
    """Apply the creation checks to the fields present in an update."""

    for name, value in changes.items():
        if _is_blank(value):
            raise InvalidInput(f"{INVALID_PAYLOAD_MESSAGE}: {name} cannot be empty")
    if "date" in changes:
        ensure_valid_date(changes["date"])
    if "duration" in changes:
        ensure_valid_duration(changes["duration"])


__all__ = [
    "INVALID_PAYLOAD_MESSAGE",
    "ensure_required_fields",
    "ensure_valid_date",
    "ensure_valid_duration",
    "validate_activity_changes",
    "validate_new_activity",
]
