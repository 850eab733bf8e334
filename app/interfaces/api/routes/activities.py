"""Rutas para administrar actividades y sus participantes."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from app.application.use_cases.activities import (
    create_activity as create_activity_uc,
    delete_activity as delete_activity_uc,
    get_activity as get_activity_uc,
    link_participant as link_participant_uc,
    list_activities as list_activities_uc,
    search_activities as search_activities_uc,
    unlink_participant as unlink_participant_uc,
    update_activity as update_activity_uc,
)
from app.domain.entities import Activity
from app.domain.exceptions import InvalidInput, RequestCompletionError
from app.infrastructure.database import get_db
from app.interfaces.api.routes_helpers import to_http_exception
from app.interfaces.api.schemas import ActivityCreate, ActivityRead, ActivityUpdate

router = APIRouter(prefix="/activities", tags=["activities"])


def _to_read_model(activity: Activity) -> ActivityRead:
    return ActivityRead.model_validate(activity)


@router.post("/", response_model=ActivityRead, status_code=status.HTTP_201_CREATED)
def add_activity(
    activity_in: ActivityCreate,
    db: Session = Depends(get_db),
) -> ActivityRead:
    """Crea una nueva actividad sin participantes."""

    try:
        activity = create_activity_uc(
            db,
            activity_type=activity_in.activity_type,
            description=activity_in.description,
            date=activity_in.date,
            time=activity_in.time,
            duration=activity_in.duration,
        )
    except (InvalidInput, RequestCompletionError) as exc:
        raise to_http_exception(exc) from exc
    return _to_read_model(activity)


@router.get("/", response_model=list[ActivityRead])
def get_all_activities(db: Session = Depends(get_db)) -> list[ActivityRead]:
    """Devuelve todas las actividades registradas."""

    return [_to_read_model(activity) for activity in list_activities_uc(db)]


@router.get("/search", response_model=list[ActivityRead])
def search_activity(
    activity_type: str = Query(
        "", alias="type", description="Texto a buscar dentro del tipo de actividad"
    ),
    db: Session = Depends(get_db),
) -> list[ActivityRead]:
    """Busca actividades cuyo tipo contenga el texto indicado."""

    try:
        activities = search_activities_uc(db, activity_type)
    except RequestCompletionError as exc:
        raise to_http_exception(exc) from exc
    return [_to_read_model(activity) for activity in activities]


@router.get("/{activity_id}", response_model=ActivityRead)
def get_activity(activity_id: str, db: Session = Depends(get_db)) -> ActivityRead:
    """Obtiene la actividad identificada por ``activity_id``."""

    try:
        activity = get_activity_uc(db, activity_id)
    except RequestCompletionError as exc:
        raise to_http_exception(exc) from exc
    return _to_read_model(activity)


@router.put("/{activity_id}", response_model=ActivityRead)
def update_activity(
    activity_id: str,
    activity_in: ActivityUpdate,
    db: Session = Depends(get_db),
) -> ActivityRead:
    """Actualiza los datos de una actividad existente."""

    update_data = activity_in.model_dump(exclude_unset=True)
    try:
        activity = update_activity_uc(db, activity_id=activity_id, **update_data)
    except (InvalidInput, RequestCompletionError) as exc:
        raise to_http_exception(exc) from exc
    return _to_read_model(activity)


@router.delete("/{activity_id}", response_model=ActivityRead)
def delete_activity(activity_id: str, db: Session = Depends(get_db)) -> ActivityRead:
    """Elimina la actividad y devuelve el registro eliminado."""

    try:
        activity = delete_activity_uc(db, activity_id)
    except RequestCompletionError as exc:
        raise to_http_exception(exc) from exc
    return _to_read_model(activity)


@router.post("/{activity_id}/participants/{participant_id}", response_model=ActivityRead)
def insert_participant_into_activity(
    activity_id: str,
    participant_id: str,
    db: Session = Depends(get_db),
) -> ActivityRead:
    """Agrega una copia del participante a la actividad."""

    try:
        activity = link_participant_uc(
            db, activity_id=activity_id, participant_id=participant_id
        )
    except RequestCompletionError as exc:
        raise to_http_exception(exc) from exc
    return _to_read_model(activity)


@router.delete("/{activity_id}/participants/{participant_id}", response_model=ActivityRead)
def remove_participant_from_activity(
    activity_id: str,
    participant_id: str,
    db: Session = Depends(get_db),
) -> ActivityRead:
    """Quita de la actividad todas las copias del participante indicado."""

    try:
        activity = unlink_participant_uc(
            db, activity_id=activity_id, participant_id=participant_id
        )
    except RequestCompletionError as exc:
        raise to_http_exception(exc) from exc
    return _to_read_model(activity)


__all__ = ["router"]
