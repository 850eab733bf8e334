"""Use case for removing a participant from an activity."""

import logging
from dataclasses import replace

from sqlalchemy.orm import Session

from app.domain.entities import Activity
from app.domain.exceptions import NotFoundError
from app.infrastructure.database import write_lock
from app.infrastructure.repositories import ActivityRepository
from app.utils import now_ns

logger = logging.getLogger(__name__)


def unlink_participant(session: Session, *, activity_id: str, participant_id: str) -> Activity:
    """Drop every embedded copy of ``participant_id`` from the activity.

    ``updated_at`` is refreshed even when nothing matched.
    """

    with write_lock:
        repository = ActivityRepository(session)
        activity = repository.get(activity_id)
        if activity is None:
            raise NotFoundError(f"No such activity found with given Id {activity_id}")

        remaining = [
            participant
            for participant in activity.participants
            if participant.id != participant_id
        ]
        removed = len(activity.participants) - len(remaining)
        activity = repository.save(
            replace(activity, participants=remaining, updated_at=now_ns())
        )

    logger.info(
        "Removed %d link(s) to participant %s from activity %s",
        removed,
        participant_id,
        activity_id,
    )
    return activity
