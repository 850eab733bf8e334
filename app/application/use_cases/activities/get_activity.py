"""Use case for retrieving a single activity."""

from sqlalchemy.orm import Session

from app.domain.entities import Activity
from app.domain.exceptions import NotFoundError
from app.infrastructure.repositories import ActivityRepository


def get_activity(session: Session, activity_id: str) -> Activity:
    """Return the activity identified by ``activity_id`` or raise an error."""

    activity = ActivityRepository(session).get(activity_id)
    if activity is None:
        raise NotFoundError(f"No activity found with id: {activity_id}")
    return activity
