"""Helpers shared by the repository implementations."""

from __future__ import annotations

import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.domain.exceptions import RequestCompletionError

logger = logging.getLogger(__name__)


def commit_or_fail(session: Session, action: str) -> None:
    """Commit ``session`` or roll back and raise ``RequestCompletionError``."""

    try:
        session.commit()
    except SQLAlchemyError as exc:
        session.rollback()
        logger.exception("Database error while trying to %s", action)
        raise RequestCompletionError(f"Error while trying to {action}") from exc


__all__ = ["commit_or_fail"]
