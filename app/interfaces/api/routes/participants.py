"""Rutas para administrar participantes."""

from __future__ import annotations

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.application.use_cases.participants import (
    create_participant as create_participant_uc,
    delete_participant as delete_participant_uc,
    get_participant as get_participant_uc,
    list_participants as list_participants_uc,
    update_participant as update_participant_uc,
)
from app.domain.entities import Participant
from app.domain.exceptions import InvalidInput, RequestCompletionError
from app.infrastructure.database import get_db
from app.interfaces.api.routes_helpers import to_http_exception
from app.interfaces.api.schemas import (
    ParticipantCreate,
    ParticipantRead,
    ParticipantUpdate,
)

router = APIRouter(prefix="/participants", tags=["participants"])


def _to_read_model(participant: Participant) -> ParticipantRead:
    return ParticipantRead.model_validate(participant)


@router.post("/", response_model=ParticipantRead, status_code=status.HTTP_201_CREATED)
def create_new_participant(
    participant_in: ParticipantCreate,
    db: Session = Depends(get_db),
) -> ParticipantRead:
    """Registra un nuevo participante."""

    try:
        participant = create_participant_uc(db, name=participant_in.name)
    except (InvalidInput, RequestCompletionError) as exc:
        raise to_http_exception(exc) from exc
    return _to_read_model(participant)


@router.get("/", response_model=list[ParticipantRead])
def get_all_participants(db: Session = Depends(get_db)) -> list[ParticipantRead]:
    """Devuelve todos los participantes registrados."""

    return [_to_read_model(participant) for participant in list_participants_uc(db)]


@router.get("/{participant_id}", response_model=ParticipantRead)
def get_participant_by_id(
    participant_id: str, db: Session = Depends(get_db)
) -> ParticipantRead:
    """Obtiene al participante identificado por ``participant_id``."""

    try:
        participant = get_participant_uc(db, participant_id)
    except RequestCompletionError as exc:
        raise to_http_exception(exc) from exc
    return _to_read_model(participant)


@router.put("/{participant_id}", response_model=ParticipantRead)
def update_existing_participant(
    participant_id: str,
    participant_in: ParticipantUpdate,
    db: Session = Depends(get_db),
) -> ParticipantRead:
    """Actualiza el nombre de un participante existente."""

    try:
        participant = update_participant_uc(
            db, participant_id=participant_id, name=participant_in.name
        )
    except (InvalidInput, RequestCompletionError) as exc:
        raise to_http_exception(exc) from exc
    return _to_read_model(participant)


@router.delete("/{participant_id}", response_model=ParticipantRead)
def delete_participant(
    participant_id: str, db: Session = Depends(get_db)
) -> ParticipantRead:
    """Elimina al participante sin modificar las actividades que lo incluyen."""

    try:
        participant = delete_participant_uc(db, participant_id)
    except RequestCompletionError as exc:
        raise to_http_exception(exc) from exc
    return _to_read_model(participant)


__all__ = ["router"]
