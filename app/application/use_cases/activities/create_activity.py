"""Use case for creating activities."""

import logging

from sqlalchemy.orm import Session

from app.domain.entities import Activity
from app.infrastructure.database import write_lock
from app.infrastructure.repositories import ActivityRepository
from app.utils import new_identifier, now_ns
from .validators import validate_new_activity

logger = logging.getLogger(__name__)


def create_activity(
    session: Session,
    *,
    activity_type: str | None,
    description: str | None,
    date: str | None,
    time: str | None,
    duration: str | None,
) -> Activity:
    """Validate the payload and store a new activity without participants."""

    fields = validate_new_activity(
        {
            "activity_type": activity_type,
            "description": description,
            "date": date,
            "time": time,
            "duration": duration,
        }
    )

    entity = Activity(
        id=new_identifier(),
        created_at=now_ns(),
        updated_at=None,
        participants=[],
        **fields,
    )
    with write_lock:
        activity = ActivityRepository(session).save(entity)

    logger.info("Created activity %s of type %r", activity.id, activity.activity_type)
    return activity
