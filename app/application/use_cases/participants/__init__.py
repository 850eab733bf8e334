"""Use cases for managing participants."""

from .create_participant import create_participant
from .delete_participant import delete_participant
from .get_participant import get_participant
from .list_participants import list_participants
from .update_participant import update_participant

__all__ = [
    "create_participant",
    "delete_participant",
    "get_participant",
    "list_participants",
    "update_participant",
]
