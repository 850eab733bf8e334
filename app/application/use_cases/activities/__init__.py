"""Use cases for managing activities."""

from .create_activity import create_activity
from .delete_activity import delete_activity
from .get_activity import get_activity
from .link_participant import link_participant
from .list_activities import list_activities
from .search_activities import search_activities
from .unlink_participant import unlink_participant
from .update_activity import update_activity

__all__ = [
    "create_activity",
    "delete_activity",
    "get_activity",
    "link_participant",
    "list_activities",
    "search_activities",
    "unlink_participant",
    "update_activity",
]
