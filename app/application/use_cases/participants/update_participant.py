"""Use case for renaming participants."""

import logging
from dataclasses import replace

from sqlalchemy.orm import Session

from app.config import get_settings
from app.domain.entities import Participant
from app.domain.exceptions import NotFoundError
from app.infrastructure.database import write_lock
from app.infrastructure.repositories import ParticipantRepository
from .validators import ensure_valid_name

logger = logging.getLogger(__name__)


def update_participant(
    session: Session,
    *,
    participant_id: str,
    name: str,
    strict: bool | None = None,
) -> Participant:
    """Replace the participant's name.

    Copies already embedded in activities keep the previous name.
    """

    if strict is None:
        strict = get_settings().strict_update_validation
    if strict:
        ensure_valid_name(name)

    with write_lock:
        repository = ParticipantRepository(session)
        current = repository.get(participant_id)
        if current is None:
            raise NotFoundError(f"No such participant found with given Id {participant_id}")
        participant = repository.save(replace(current, name=name))

    logger.info("Renamed participant %s", participant_id)
    return participant
