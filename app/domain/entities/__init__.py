"""Domain entities exposed by the application."""

from .activity import ACTIVITY_PAYLOAD_FIELDS, Activity
from .participant import Participant

__all__ = [
    "ACTIVITY_PAYLOAD_FIELDS",
    "Activity",
    "Participant",
]
