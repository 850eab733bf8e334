"""Use case for deleting participants."""

import logging

from sqlalchemy.orm import Session

from app.domain.entities import Participant
from app.domain.exceptions import NotFoundError
from app.infrastructure.database import write_lock
from app.infrastructure.repositories import ParticipantRepository

logger = logging.getLogger(__name__)


def delete_participant(session: Session, participant_id: str) -> Participant:
    """Remove the participant and return the record as it was before deletion.

    Activities that embed a copy of this participant are left untouched.
    """

    with write_lock:
        repository = ParticipantRepository(session)
        participant = repository.get(participant_id)
        if participant is None:
            raise NotFoundError(f"There is no participant with id: {participant_id}")
        repository.delete(participant_id)

    logger.info("Deleted participant %s", participant_id)
    return participant
