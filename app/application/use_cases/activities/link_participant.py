"""Use case for adding a participant to an activity."""

import logging
from dataclasses import replace

from sqlalchemy.orm import Session

from app.domain.entities import Activity
from app.domain.exceptions import NotFoundError
from app.infrastructure.database import write_lock
from app.infrastructure.repositories import ActivityRepository, ParticipantRepository
from app.utils import now_ns

logger = logging.getLogger(__name__)


def link_participant(session: Session, *, activity_id: str, participant_id: str) -> Activity:
    """Append a copy of the participant to the activity's participant list.

    The copy is not refreshed when the participant changes or is deleted
    later, and linking the same participant twice stores two copies.
    """

    with write_lock:
        activity_repository = ActivityRepository(session)
        activity = activity_repository.get(activity_id)
        if activity is None:
            raise NotFoundError(f"No such activity found with given Id {activity_id}")

        participant = ParticipantRepository(session).get(participant_id)
        if participant is None:
            raise NotFoundError(f"No such participant found with given Id {participant_id}")

        updated = replace(
            activity,
            participants=[*activity.participants, participant.snapshot()],
            updated_at=now_ns(),
        )
        activity = activity_repository.save(updated)

    logger.info("Linked participant %s to activity %s", participant_id, activity_id)
    return activity
