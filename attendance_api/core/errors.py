"""Error kinds surfaced at the handler boundary.

Each kind carries the message sent to the client and the HTTP status it maps
to. ``register_error_handlers`` turns them into ``{"error": message}`` bodies.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

log = logging.getLogger(__name__)


class AttendanceApiError(Exception):
    http_status = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_response(self) -> dict:
        return {"error": self.message}


class ClientInputError(AttendanceApiError):
    """Missing or invalid request data, raised before touching the database."""

    http_status = status.HTTP_400_BAD_REQUEST


class ResourceNotFound(AttendanceApiError):
    """A statement ran but affected no rows."""

    http_status = status.HTTP_404_NOT_FOUND


class InternalError(AttendanceApiError):
    """Database, pool or document failure. The message is always generic."""

    http_status = status.HTTP_500_INTERNAL_SERVER_ERROR


class DatabaseError(InternalError):
    """Raised by the data access layer in place of driver and pool errors."""

    def __init__(self, message: str = "Internal Server Error", operation: str = "query"):
        super().__init__(message)
        self.operation = operation


def register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(AttendanceApiError)
    async def attendance_error_handler(request: Request, exc: AttendanceApiError):
        if exc.http_status >= 500:
            log.error("%s %s failed: %s", request.method, request.url.path, exc.message)
        else:
            log.warning("%s %s rejected (%s): %s", request.method, request.url.path, exc.http_status, exc.message)
        return JSONResponse(status_code=exc.http_status, content=exc.to_response())

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        log.warning("Invalid request on %s: %s", request.url.path, exc.errors())
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": "Invalid request data"},
        )

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        log.error("Unhandled exception on %s", request.url.path, exc_info=exc)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "Internal Server Error"},
        )
