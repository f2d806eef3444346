"""Exception handlers mapping domain errors to HTTP responses.

Every error body has the shape ``{"message": "..."}``.
"""

import logfire
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from debatify.adapter.error import ProviderError
from debatify.domain.error import (
    AccessDeniedError,
    ConflictError,
    InvalidCredentialError,
    NotAuthorizedError,
    NotFoundError,
    StaleContentError,
    UnauthenticatedError,
    ValidationError,
)

# Checked in order; the first matching class wins
_STATUS_BY_ERROR: list[tuple[type[Exception], int]] = [
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (ConflictError, status.HTTP_400_BAD_REQUEST),
    (UnauthenticatedError, status.HTTP_401_UNAUTHORIZED),
    (InvalidCredentialError, status.HTTP_401_UNAUTHORIZED),
    (AccessDeniedError, status.HTTP_401_UNAUTHORIZED),
    (NotAuthorizedError, status.HTTP_403_FORBIDDEN),
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (StaleContentError, status.HTTP_409_CONFLICT),
    (ProviderError, status.HTTP_502_BAD_GATEWAY),
]


def _message(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"message": message})


async def domain_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Translate a known domain or adapter error into its status code."""
    for error_type, status_code in _STATUS_BY_ERROR:
        if isinstance(exc, error_type):
            logfire.warn(
                "Request failed",
                error_type=type(exc).__name__,
                error=str(exc),
                status_code=status_code,
                method=request.method,
                path=request.url.path,
            )
            return _message(status_code, str(exc))

    return await unexpected_error_handler(request, exc)


async def validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Handle request body/query validation errors.

    Reports the first problem in a single readable message.
    """
    errors = exc.errors()
    if errors:
        first = errors[0]
        field = ".".join(str(loc) for loc in first["loc"] if loc != "body")
        message = f"{field}: {first['msg']}" if field else first["msg"]
    else:
        message = "Invalid request"

    logfire.warn(
        "Request validation failed",
        error=message,
        method=request.method,
        path=request.url.path,
    )
    return _message(status.HTTP_400_BAD_REQUEST, message)


async def unexpected_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Last resort: log the failure and hide the details from the client."""
    logfire.error(
        "Unhandled error",
        error_type=type(exc).__name__,
        error=str(exc),
        method=request.method,
        path=request.url.path,
    )
    return _message(status.HTTP_500_INTERNAL_SERVER_ERROR, "Server error")


def register_error_handlers(app: FastAPI) -> None:
    """Attach all handlers to the application.

    Args:
        app: FastAPI application instance
    """
    for error_type, _ in _STATUS_BY_ERROR:
        app.add_exception_handler(error_type, domain_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, unexpected_error_handler)
