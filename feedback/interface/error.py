"""Interface layer error handling.

Domain and adapter errors are mapped to HTTP responses here, so routes can
let them propagate.
"""

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
import logfire

from feedback.adapter.error import AdapterError
from feedback.domain.error import (
    DomainError,
    InvalidStatusTransitionError,
    NotAuthorizedError,
    NotFoundError,
    PersistenceError,
    ValidationError,
)

# Most specific first; the first matching class wins
STATUS_CODES: list[tuple[type[Exception], int]] = [
    (InvalidStatusTransitionError, status.HTTP_409_CONFLICT),
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (NotAuthorizedError, status.HTTP_401_UNAUTHORIZED),
    (PersistenceError, status.HTTP_503_SERVICE_UNAVAILABLE),
    (AdapterError, status.HTTP_503_SERVICE_UNAVAILABLE),
    (DomainError, status.HTTP_400_BAD_REQUEST),
]


def status_code_for(exc: Exception) -> int:
    """HTTP status for a domain or adapter error."""
    for error_type, code in STATUS_CODES:
        if isinstance(exc, error_type):
            return code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


async def handle_error(request: Request, exc: Exception) -> JSONResponse:
    """Render an error as ``{"detail": ...}`` with the mapped status."""
    code = status_code_for(exc)
    log = logfire.error if code >= 500 else logfire.info
    log(
        "Request failed",
        path=request.url.path,
        status_code=code,
        error=str(exc),
        error_type=type(exc).__name__,
    )
    return JSONResponse(status_code=code, content={"detail": str(exc)})


def register_error_handlers(app: FastAPI) -> None:
    """Register handlers for domain and adapter errors.

    Args:
        app: FastAPI application
    """
    app.add_exception_handler(DomainError, handle_error)
    app.add_exception_handler(AdapterError, handle_error)
