"""Use case for retrieving a single participant."""

from sqlalchemy.orm import Session

from app.domain.entities import Participant
from app.domain.exceptions import NotFoundError
from app.infrastructure.repositories import ParticipantRepository


def get_participant(session: Session, participant_id: str) -> Participant:
    """Return the participant identified by ``participant_id`` or raise an error."""

    participant = ParticipantRepository(session).get(participant_id)
    if participant is None:
        raise NotFoundError(f"No participant found with id: {participant_id}")
    return participant
