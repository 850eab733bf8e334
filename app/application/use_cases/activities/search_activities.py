"""Use case for searching activities by type."""

import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.domain.entities import Activity
from app.domain.exceptions import RequestCompletionError
from app.infrastructure.repositories import ActivityRepository

logger = logging.getLogger(__name__)


def search_activities(session: Session, activity_type: str) -> list[Activity]:
    """Return the activities whose type contains ``activity_type``.

    Matching is a case-insensitive substring test over every stored record,
    so an empty search term returns all activities.
    """

    needle = activity_type.lower()
    try:
        activities = ActivityRepository(session).list()
    except SQLAlchemyError as exc:
        logger.exception("Database error while searching activities for %r", activity_type)
        raise RequestCompletionError("Error while searching for this Activity") from exc

    return [
        activity for activity in activities if needle in activity.activity_type.lower()
    ]
