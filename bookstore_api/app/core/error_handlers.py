"""
Translation of exceptions into structured HTTP error responses.

Every failure leaving a route is rendered as an ``ErrorResponse``
body.  Service errors map onto a fixed status each; request parsing
errors raised by FastAPI become 400 responses with one entry per
invalid field; anything else is a 500 whose message never includes
the original exception text.
"""

import logging
from datetime import datetime
from http import HTTPStatus
from typing import List, Optional, Sequence, Union

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from bookstore_api.app.core.exceptions import (
    BookAlreadyExistsError,
    BookNotFoundError,
    BookServiceError,
    InvalidInputError,
)
from bookstore_api.app.schemas.error import ErrorResponse


logger = logging.getLogger(__name__)

UNEXPECTED_ERROR_MESSAGE = "An unexpected error occurred"


def error_response(
    status_code: int,
    message: str,
    request: Request,
    validation_errors: Optional[List[str]] = None,
) -> JSONResponse:
    """Build a JSON response carrying an ``ErrorResponse`` body."""
    status_code = int(status_code)
    body = ErrorResponse(
        timestamp=datetime.now(),
        status=status_code,
        error=HTTPStatus(status_code).phrase,
        message=message,
        path=request.url.path,
        validation_errors=validation_errors,
    )
    return JSONResponse(status_code=status_code, content=body.model_dump(mode="json"))


def status_for(exc: BookServiceError) -> int:
    """Return the HTTP status that represents a service error."""
    if isinstance(exc, InvalidInputError):
        return HTTPStatus.BAD_REQUEST
    if isinstance(exc, BookNotFoundError):
        return HTTPStatus.NOT_FOUND
    if isinstance(exc, BookAlreadyExistsError):
        return HTTPStatus.CONFLICT
    return HTTPStatus.BAD_REQUEST


def _format_location(loc: Sequence[Union[int, str]]) -> str:
    # Drop the leading "body"/"path"/"query" segment FastAPI adds.
    parts = [str(part) for part in loc[1:]] or [str(part) for part in loc]
    return ".".join(parts)


async def handle_service_error(request: Request, exc: BookServiceError) -> JSONResponse:
    status_code = status_for(exc)
    logger.warning("%s %s -> %s: %s", request.method, request.url.path, status_code, exc.message)
    validation_errors = exc.errors if isinstance(exc, InvalidInputError) else None
    return error_response(status_code, exc.message, request, validation_errors)


async def handle_request_validation_error(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    validation_errors = [
        f"{_format_location(err.get('loc', ()))}: {err.get('msg', 'invalid value')}"
        for err in exc.errors()
    ]
    logger.warning("Validation error on %s: %s", request.url.path, validation_errors)
    return error_response(
        HTTPStatus.BAD_REQUEST, "Validation failed", request, validation_errors
    )


async def handle_http_exception(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    message = exc.detail if isinstance(exc.detail, str) else HTTPStatus(exc.status_code).phrase
    return error_response(exc.status_code, message, request)


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unexpected error on %s %s", request.method, request.url.path)
    return error_response(
        HTTPStatus.INTERNAL_SERVER_ERROR, UNEXPECTED_ERROR_MESSAGE, request
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Install the error handlers on ``app``."""
    app.add_exception_handler(BookServiceError, handle_service_error)
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)
    app.add_exception_handler(StarletteHTTPException, handle_http_exception)
    app.add_exception_handler(Exception, handle_unexpected_error)
