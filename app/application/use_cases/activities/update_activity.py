"""Use case for updating activity details."""

import logging
from dataclasses import replace

from sqlalchemy.orm import Session

from app.config import get_settings
from app.domain.entities import Activity
from app.domain.exceptions import NotFoundError
from app.infrastructure.database import write_lock
from app.infrastructure.repositories import ActivityRepository
from app.utils import now_ns
from .validators import validate_activity_changes

logger = logging.getLogger(__name__)


def update_activity(
    session: Session,
    *,
    activity_id: str,
    activity_type: str | None = None,
    description: str | None = None,
    date: str | None = None,
    time: str | None = None,
    duration: str | None = None,
    strict: bool | None = None,
) -> Activity:
    """Merge the provided fields over the stored activity.

    Only ``strict`` updates re-run the creation format checks; by default
    the values are stored as given. ``id``, ``created_at`` and the linked
    participants are never modified here.
    """

    changes = {
        name: value
        for name, value in (
            ("activity_type", activity_type),
            ("description", description),
            ("date", date),
            ("time", time),
            ("duration", duration),
        )
        if value is not None
    }
    if strict is None:
        strict = get_settings().strict_update_validation
    if strict:
        validate_activity_changes(changes)

    with write_lock:
        repository = ActivityRepository(session)
        current = repository.get(activity_id)
        if current is None:
            raise NotFoundError(f"No such activity found with given Id {activity_id}")

        updated = replace(current, **changes, updated_at=now_ns())
        activity = repository.save(updated)

    logger.info("Updated activity %s (%s)", activity.id, ", ".join(sorted(changes)) or "no fields")
    return activity
