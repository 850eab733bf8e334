"""Use case for listing participants."""

from collections.abc import Sequence

from sqlalchemy.orm import Session

from app.domain.entities import Participant
from app.infrastructure.repositories import ParticipantRepository


def list_participants(session: Session) -> Sequence[Participant]:
    """Return every stored participant ordered by id."""

    return ParticipantRepository(session).list()
