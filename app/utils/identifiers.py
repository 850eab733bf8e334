"""Generation of record identifiers."""

from uuid import uuid4


def new_identifier() -> str:
    """Return a fresh random identifier for a stored record."""

    return str(uuid4())


__all__ = ["new_identifier"]
