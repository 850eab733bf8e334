"""Use case for listing activities."""

from collections.abc import Sequence

from sqlalchemy.orm import Session

from app.domain.entities import Activity
from app.infrastructure.repositories import ActivityRepository


def list_activities(session: Session) -> Sequence[Activity]:
    """Return every stored activity ordered by id."""

    return ActivityRepository(session).list()
