"""Error kinds reported by the activity and participant operations."""


class InvalidInput(ValueError):
    """Raised when a payload fails validation before the store is accessed."""


class RequestCompletionError(ValueError):
    """Raised when a request cannot be completed against the store."""


class NotFoundError(RequestCompletionError):
    """Raised when the record targeted by an operation does not exist."""


__all__ = ["InvalidInput", "NotFoundError", "RequestCompletionError"]
