from .activity import ActivityCreate, ActivityPayload, ActivityRead, ActivityUpdate
from .health import HealthRead
from .participant import ParticipantCreate, ParticipantRead, ParticipantUpdate

__all__ = [
    "ActivityCreate",
    "ActivityPayload",
    "ActivityRead",
    "ActivityUpdate",
    "HealthRead",
    "ParticipantCreate",
    "ParticipantRead",
    "ParticipantUpdate",
]
