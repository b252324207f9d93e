# server/core/errors.py

import logging
from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException


logger = logging.getLogger(__name__)


# -------------------------------
# Error Taxonomy
# -------------------------------

class ApiError(Exception):
    """
    Base class for errors reported to API clients.
    Each subclass maps to exactly one HTTP status; the message is shown to the caller as-is.
    """
    status_code = 500
    default_message = "Internal server error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class BadRequest(ApiError):
    status_code = 400
    default_message = "Bad request"


class InvalidCredentials(ApiError):
    status_code = 401
    default_message = "Invalid credentials"


class Unauthenticated(ApiError):
    status_code = 401
    default_message = "Access denied. No token provided."


class Forbidden(ApiError):
    status_code = 403
    default_message = "Invalid or expired token."


class NotFound(ApiError):
    status_code = 404
    default_message = "Not found"


class ServerError(ApiError):
    status_code = 500
    default_message = "Internal server error"


# -------------------------------
# Exception Handlers
# -------------------------------

def error_response(status_code: int, message: str, headers: dict | None = None) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message}, headers=headers)


def api_error_handler(request: Request, exc: ApiError):
    return error_response(exc.status_code, exc.message)


def validation_error_handler(request: Request, exc: RequestValidationError):
    logger.debug("Rejected %s %s: %s", request.method, request.url.path, exc.errors())
    return error_response(400, "Invalid request")


def http_error_handler(request: Request, exc: StarletteHTTPException):
    return error_response(exc.status_code, str(exc.detail), getattr(exc, "headers", None))


def unhandled_error_handler(request: Request, exc: Exception):
    logger.error("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
    return error_response(500, ServerError.default_message)


def register_exception_handlers(app):
    app.add_exception_handler(ApiError, api_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
