"""Common validation helpers for participant use cases."""

from app.domain.exceptions import InvalidInput

EMPTY_NAME_MESSAGE = "Name cannot be empty"


def ensure_valid_name(name: str | None) -> str:
    """Return ``name`` or raise ``InvalidInput`` when it is empty."""

    if name is None or not name.strip():
        raise InvalidInput(EMPTY_NAME_MESSAGE)
    return name
