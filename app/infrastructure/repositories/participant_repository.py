"""Persistence layer for participants."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy.orm import Session

from app.domain.entities import Participant
from app.domain.exceptions import NotFoundError
from app.infrastructure.models import ParticipantModel
from .base import commit_or_fail


class ParticipantRepository:
    """Key-value style access to participant records keyed by id."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list(self) -> Sequence[Participant]:
        query = self.session.query(ParticipantModel).order_by(ParticipantModel.id)
        return [self._to_entity(model) for model in query.all()]

    def get(self, participant_id: str) -> Participant | None:
        model = self.session.get(ParticipantModel, participant_id)
        return self._to_entity(model) if model else None

    def save(self, participant: Participant) -> Participant:
        """Insert ``participant`` or overwrite the record stored under its id."""

        model = self.session.get(ParticipantModel, participant.id)
        if model is None:
            model = ParticipantModel(id=participant.id)
        model.name = participant.name
        self.session.add(model)
        commit_or_fail(self.session, "save participant")
        return self._to_entity(model)

    def delete(self, participant_id: str) -> None:
        model = self.session.get(ParticipantModel, participant_id)
        if not model:
            msg = f"Participant with id {participant_id} not found"
            raise NotFoundError(msg)
        self.session.delete(model)
        commit_or_fail(self.session, "delete participant")

    @staticmethod
    def _to_entity(model: ParticipantModel) -> Participant:
        return Participant(id=model.id, name=model.name)


__all__ = ["ParticipantRepository"]
