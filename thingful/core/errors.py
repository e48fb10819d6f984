"""
Service errors and their HTTP rendering.
Every user-facing failure is reported as ``{"error": <reason>}``.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

logger = logging.getLogger(__name__)

INTERNAL_ERROR_REASON = "Internal server error"


class ServiceError(Exception):
    """Base for errors the caller can act on. Carries the response status and reason."""

    status_code: int = status.HTTP_400_BAD_REQUEST

    def __init__(self, reason: str):
        super().__init__(reason)
        self.reason = reason


class MissingFieldError(ServiceError):
    def __init__(self, field: str):
        super().__init__(f"Missing '{field}' in request body")
        self.field = field


class PasswordPolicyError(ServiceError):
    pass


class UsernameTakenError(ServiceError):
    def __init__(self):
        super().__init__("Username already taken")


class UserNotFoundError(ServiceError):
    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self):
        super().__init__("User doesn't exist")


async def service_error_handler(request: Request, exc: ServiceError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"error": exc.reason})


async def database_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    """Persistence failures are logged in full but reported opaquely."""
    logger.exception("Database error on %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": INTERNAL_ERROR_REASON},
    )


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed input (wrong JSON types, non-object bodies, bad path params) gets the same 400 shape."""
    errors = exc.errors()
    loc = [str(part) for part in errors[0].get("loc", ())] if errors else []
    where = loc[0] if loc else "body"
    if len(loc) > 1:
        reason = f"Invalid '{loc[1]}' in request {where}"
    else:
        reason = f"Invalid request {where}"
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": reason})


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ServiceError, service_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(SQLAlchemyError, database_error_handler)
