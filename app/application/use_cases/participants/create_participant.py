"""Use case for creating participants."""

import logging

from sqlalchemy.orm import Session

from app.domain.entities import Participant
from app.infrastructure.database import write_lock
from app.infrastructure.repositories import ParticipantRepository
from app.utils import new_identifier
from .validators import ensure_valid_name

logger = logging.getLogger(__name__)


def create_participant(session: Session, *, name: str | None) -> Participant:
    """Create a new participant with a server assigned id."""

    entity = Participant(id=new_identifier(), name=ensure_valid_name(name))
    with write_lock:
        participant = ParticipantRepository(session).save(entity)

    logger.info("Created participant %s", participant.id)
    return participant
