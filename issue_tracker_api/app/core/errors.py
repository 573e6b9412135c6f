"""
Error taxonomy and the JSON error envelope.

Services raise subclasses of ``IssueTrackerError``; the handlers
installed by ``register_exception_handlers`` turn them, together with
FastAPI's own request validation and routing errors, into the
response body ``{"error": <message>, "code": <http status>}``.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


class IssueTrackerError(Exception):
    """Base class for errors reported to API callers."""

    status_code: int = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(IssueTrackerError):
    """Malformed or semantically invalid input."""

    status_code = status.HTTP_400_BAD_REQUEST


class NotFoundError(IssueTrackerError):
    """The referenced issue does not exist."""

    status_code = status.HTTP_404_NOT_FOUND


class ForbiddenError(IssueTrackerError):
    """Mutation attempted on an issue in a terminal state."""

    status_code = status.HTTP_403_FORBIDDEN


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message, "code": status_code})


def describe_request_error(exc: RequestValidationError) -> str:
    """Return a short human readable message for a request validation error.

    FastAPI reports a body that is not valid JSON as a ``json_invalid``
    error; everything else is reported against the first offending
    field, e.g. ``Invalid userId``.
    """
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    first = errors[0]
    if first.get("type") == "json_invalid":
        return "Invalid JSON body"
    loc = [str(part) for part in first.get("loc", ()) if part not in ("body", "query", "path")]
    if not loc:
        return "Invalid JSON body"
    return f"Invalid {'.'.join(loc)}"


async def _handle_issue_tracker_error(request: Request, exc: IssueTrackerError) -> JSONResponse:
    logger.warning("%s %s -> %s: %s", request.method, request.url.path, exc.status_code, exc.message)
    return error_response(exc.status_code, exc.message)


async def _handle_request_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    message = describe_request_error(exc)
    logger.warning("%s %s -> 400: %s", request.method, request.url.path, message)
    return error_response(status.HTTP_400_BAD_REQUEST, message)


async def _handle_http_exception(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    logger.warning("%s %s -> %s: %s", request.method, request.url.path, exc.status_code, exc.detail)
    return error_response(exc.status_code, str(exc.detail))


def register_exception_handlers(app: FastAPI) -> None:
    """Install the error envelope handlers on ``app``."""
    app.add_exception_handler(IssueTrackerError, _handle_issue_tracker_error)
    app.add_exception_handler(RequestValidationError, _handle_request_validation_error)
    app.add_exception_handler(StarletteHTTPException, _handle_http_exception)
