"""Persistence layer for activities."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from sqlalchemy.orm import Session

from app.domain.entities import Activity, Participant
from app.domain.exceptions import NotFoundError
from app.infrastructure.models import ActivityModel
from .base import commit_or_fail


class ActivityRepository:
    """Key-value style access to activity records keyed by id."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list(self) -> Sequence[Activity]:
        query = self.session.query(ActivityModel).order_by(ActivityModel.id)
        return [self._to_entity(model) for model in query.all()]

    def get(self, activity_id: str) -> Activity | None:
        model = self.session.get(ActivityModel, activity_id)
        return self._to_entity(model) if model else None

    def save(self, activity: Activity) -> Activity:
        """Insert ``activity`` or overwrite the record stored under its id."""

        model = self.session.get(ActivityModel, activity.id)
        if model is None:
            model = ActivityModel(id=activity.id)
        self._apply_entity_to_model(model, activity)
        self.session.add(model)
        commit_or_fail(self.session, "save activity")
        return self._to_entity(model)

    def delete(self, activity_id: str) -> None:
        model = self.session.get(ActivityModel, activity_id)
        if not model:
            msg = f"Activity with id {activity_id} not found"
            raise NotFoundError(msg)
        self.session.delete(model)
        commit_or_fail(self.session, "delete activity")

    @staticmethod
    def _apply_entity_to_model(model: ActivityModel, activity: Activity) -> None:
        model.activity_type = activity.activity_type
        model.description = activity.description
        model.date = activity.date
        model.time = activity.time
        model.duration = activity.duration
        # A new list is assigned on every save so the JSON column is flagged dirty.
        model.participants = [
            {"id": participant.id, "name": participant.name}
            for participant in activity.participants
        ]
        model.created_at = activity.created_at
        model.updated_at = activity.updated_at

    @staticmethod
    def _to_entity(model: ActivityModel) -> Activity:
        return Activity(
            id=model.id,
            activity_type=model.activity_type,
            description=model.description,
            date=model.date,
            time=model.time,
            duration=model.duration,
            created_at=model.created_at,
            updated_at=model.updated_at,
            participants=[
                ActivityRepository._to_participant(entry)
                for entry in (model.participants or [])
                if isinstance(entry, Mapping)
            ],
        )

    @staticmethod
    def _to_participant(entry: Mapping[str, Any]) -> Participant:
        return Participant(id=str(entry.get("id", "")), name=str(entry.get("name", "")))


__all__ = ["ActivityRepository"]
