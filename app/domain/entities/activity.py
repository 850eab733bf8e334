"""Domain entity representing an activity."""

from __future__ import annotations

from dataclasses import dataclass, field

from .participant import Participant

ACTIVITY_PAYLOAD_FIELDS: tuple[str, ...] = (
    "activity_type",
    "description",
    "date",
    "time",
    "duration",
)


@dataclass
class Activity:
    """A post or event with scheduling details and linked participants.

    ``participants`` holds copies of the participant records taken when they
    were linked; later edits to a participant are not reflected here.
    Timestamps are nanoseconds since the epoch.
    """

    id: str
    activity_type: str
    description: str
    date: str
    time: str
    duration: str
    created_at: int
    updated_at: int | None = None
    participants: list[Participant] = field(default_factory=list)


__all__ = ["ACTIVITY_PAYLOAD_FIELDS", "Activity"]
