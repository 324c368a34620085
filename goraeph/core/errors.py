# File: goraeph/core/errors.py

"""
HTTP mapping for application errors.

This is the only place error kinds become status codes. Anything not
listed here, ``StoreError`` included, ends up as a plain 500.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from goraeph.core.exceptions import (
    DuplicateUserError,
    GoraephError,
    NotFoundError,
    ValidationError,
)

logger = logging.getLogger(__name__)


def first_validation_error(exc: RequestValidationError) -> ValidationError:
    """
    Reduce a FastAPI validation failure to its first offending field.
    """
    errors = exc.errors()
    if not errors:
        return ValidationError("Invalid request")

    error = errors[0]
    # loc looks like ("body", "email"); a malformed JSON body gives ("body", 1)
    loc = []
    for part in error.get("loc", ())[1:]:
        if not isinstance(part, str):
            break
        loc.append(part)
    field = ".".join(loc) or None
    message = error.get("msg", "Invalid value")
    if field:
        message = f"{field}: {message}"
    return ValidationError(message, field=field)


def _validation_response(exc: ValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": exc.message, "field": exc.field},
    )


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return _validation_response(first_validation_error(exc))


async def validation_handler(request: Request, exc: ValidationError) -> JSONResponse:
    return _validation_response(exc)


async def not_found_handler(request: Request, exc: NotFoundError) -> JSONResponse:
    return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"detail": str(exc)})


async def conflict_handler(request: Request, exc: DuplicateUserError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_409_CONFLICT,
        content={"detail": str(exc), "field": exc.field},
    )


async def unhandled_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error"},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(ValidationError, validation_handler)
    app.add_exception_handler(NotFoundError, not_found_handler)
    app.add_exception_handler(DuplicateUserError, conflict_handler)
    # Unmapped application errors (StoreError) stay out of the server error
    # middleware so they are answered without being re-raised
    app.add_exception_handler(GoraephError, unhandled_handler)
    app.add_exception_handler(Exception, unhandled_handler)
