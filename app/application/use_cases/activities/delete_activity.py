"""Use case for deleting activities."""

import logging

from sqlalchemy.orm import Session

from app.domain.entities import Activity
from app.domain.exceptions import NotFoundError
from app.infrastructure.database import write_lock
from app.infrastructure.repositories import ActivityRepository

logger = logging.getLogger(__name__)


def delete_activity(session: Session, activity_id: str) -> Activity:
    """Remove the activity and return the record as it was before deletion."""

    with write_lock:
        repository = ActivityRepository(session)
        activity = repository.get(activity_id)
        if activity is None:
            raise NotFoundError(f"There is no activity with id: {activity_id}")
        repository.delete(activity_id)

    logger.info("Deleted activity %s", activity_id)
    return activity
