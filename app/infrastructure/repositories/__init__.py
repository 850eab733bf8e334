"""Repository implementations for infrastructure layer."""

from .activity_repository import ActivityRepository
from .participant_repository import ParticipantRepository

__all__ = [
    "ActivityRepository",
    "ParticipantRepository",
]
