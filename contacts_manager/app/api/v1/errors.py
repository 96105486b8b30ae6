"""
Translation of service exceptions into HTTP responses.

Services raise ``ContactsError`` subclasses and know nothing about
HTTP.  The handlers registered here turn them into JSON bodies of the
form ``{"detail": "...", "errors": [{"field": ..., "message": ...}]}``.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from ...core.exceptions import (
    DuplicateNameError,
    InvalidArgumentError,
    MissingArgumentError,
    NotFoundError,
)

logger = logging.getLogger(__name__)


def _status_for(exc: InvalidArgumentError) -> int:
    if isinstance(exc, NotFoundError):
        return status.HTTP_404_NOT_FOUND
    if isinstance(exc, DuplicateNameError):
        return status.HTTP_409_CONFLICT
    return 422


async def invalid_argument_handler(request: Request, exc: InvalidArgumentError) -> JSONResponse:
    status_code = _status_for(exc)
    logger.warning("%s %s rejected (%s): %s", request.method, request.url.path, status_code, exc)
    return JSONResponse(
        status_code=status_code,
        content={
            "detail": str(exc),
            "errors": [{"field": error.field, "message": error.message} for error in exc.errors],
        },
    )


async def missing_argument_handler(request: Request, exc: MissingArgumentError) -> JSONResponse:
    logger.warning("%s %s rejected: %s", request.method, request.url.path, exc)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": str(exc), "errors": [{"field": exc.argument, "message": str(exc)}]},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(InvalidArgumentError, invalid_argument_handler)
    app.add_exception_handler(MissingArgumentError, missing_argument_handler)
