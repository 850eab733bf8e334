"""Helper utilities shared across API route handlers."""

from fastapi import HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.application.use_cases.activities.validators import INVALID_PAYLOAD_MESSAGE
from app.domain.exceptions import InvalidInput, NotFoundError, RequestCompletionError


def to_http_exception(exc: InvalidInput | RequestCompletionError) -> HTTPException:
    """Return the HTTP error carrying the kind and message of ``exc``."""

    if isinstance(exc, InvalidInput):
        status_code = status.HTTP_400_BAD_REQUEST
    elif isinstance(exc, NotFoundError):
        status_code = status.HTTP_404_NOT_FOUND
    else:
        status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    return HTTPException(
        status_code=status_code,
        detail={"kind": type(exc).__name__, "message": str(exc)},
    )


def _describe_validation_error(error: dict) -> str:
    location = [str(part) for part in error.get("loc", ()) if part != "body"]
    field = ".".join(location) or "body"
    return f"{field}: {error.get('msg', 'invalid value')}"


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Report request bodies rejected by the schemas as ``InvalidInput``."""

    details = "; ".join(_describe_validation_error(error) for error in exc.errors())
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "detail": {
                "kind": InvalidInput.__name__,
                "message": f"{INVALID_PAYLOAD_MESSAGE}: {details}",
            }
        },
    )


__all__ = ["request_validation_handler", "to_http_exception"]
