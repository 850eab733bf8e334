"""ORM models used by the application infrastructure."""

from .activity import ActivityModel
from .participant import ParticipantModel

__all__ = [
    "ActivityModel",
    "ParticipantModel",
]
