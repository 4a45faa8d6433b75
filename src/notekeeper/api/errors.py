"""Translate core errors into HTTP responses."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from ..core.errors import (
    AuthenticationError,
    AuthorizationError,
    DuplicateEntryError,
    InvalidTokenError,
    InvariantError,
    NoteKeeperError,
    NotFoundError,
    StorageError,
)
from ..core.schemas.common import ErrorResponse

logger = logging.getLogger(__name__)

# most specific first: DuplicateEntryError is an InvariantError
STATUS_CODES = (
    (AuthenticationError, status.HTTP_401_UNAUTHORIZED),
    (InvalidTokenError, status.HTTP_401_UNAUTHORIZED),
    (AuthorizationError, status.HTTP_403_FORBIDDEN),
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (DuplicateEntryError, status.HTTP_409_CONFLICT),
    (InvariantError, status.HTTP_400_BAD_REQUEST),
    (StorageError, status.HTTP_503_SERVICE_UNAVAILABLE),
)


def status_code_for(exc: NoteKeeperError) -> int:
    """HTTP status for a core error."""
    for error_class, status_code in STATUS_CODES:
        if isinstance(exc, error_class):
            return status_code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


async def notekeeper_error_handler(request: Request, exc: NoteKeeperError) -> JSONResponse:
    status_code = status_code_for(exc)
    if status_code >= 500:
        logger.error(f"{type(exc).__name__} on {request.method} {request.url.path}")

    body = ErrorResponse(error=type(exc).__name__, message=exc.message, details=exc.details)
    headers = None
    if status_code == status.HTTP_401_UNAUTHORIZED:
        headers = {"WWW-Authenticate": "Bearer"}
    return JSONResponse(
        status_code=status_code, content=body.model_dump(mode="json"), headers=headers
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Install the core error handler on the app."""
    app.add_exception_handler(NoteKeeperError, notekeeper_error_handler)
