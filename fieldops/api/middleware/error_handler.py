"""
Error handling middleware.

Every error leaves the API as ``{"status": <code>, "message": <text>}``, with
an ``errors`` list added for field-level problems.
"""

import traceback
from typing import List, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from fieldops.config.logging import get_logger
from fieldops.domain.exceptions.authorization_error import (
    AuthenticationError,
    ForbiddenError,
)
from fieldops.domain.exceptions.not_found_error import NotFoundError
from fieldops.domain.exceptions.reference_error import InvalidReferenceError
from fieldops.domain.exceptions.status_error import (
    InvalidStatusError,
    TransitionNotAllowedError,
)
from fieldops.domain.exceptions.validation_error import ValidationError
from fieldops.infrastructure.monitoring.metrics import record_error

logger = get_logger(__name__)


def error_response(
    status_code: int, message: str, errors: Optional[List[str]] = None, headers=None
) -> JSONResponse:
    content = {"status": status_code, "message": message}
    if errors:
        content["errors"] = errors
    return JSONResponse(status_code=status_code, content=content, headers=headers)


def _format_validation_errors(exc: RequestValidationError) -> List[str]:
    messages = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
        messages.append(f"{location}: {error.get('msg')}" if location else error.get("msg"))
    return messages


class ErrorHandlerMiddleware:
    """Error handling middleware for FastAPI."""

    def __init__(self, app: FastAPI):
        self.app = app
        self.add_error_handlers()

    def add_error_handlers(self) -> None:
        """Add custom error handlers to FastAPI app."""
        add_error_handlers(self.app)


def add_error_handlers(app: FastAPI) -> None:
    """Add custom error handlers to FastAPI app."""

    @app.exception_handler(RequestValidationError)
    async def request_validation_error_handler(
        request: Request, exc: RequestValidationError
    ):
        errors = _format_validation_errors(exc)
        logger.warning("Request validation error", errors=errors, path=request.url.path)
        record_error("request_validation", "api")
        return error_response(400, "Validation failed", errors)

    @app.exception_handler(ValidationError)
    async def validation_error_handler(request: Request, exc: ValidationError):
        logger.warning("Validation error", error=str(exc), path=request.url.path)
        record_error(type(exc).__name__, "api")
        return error_response(400, exc.message, exc.errors)

    @app.exception_handler(InvalidStatusError)
    async def invalid_status_handler(request: Request, exc: InvalidStatusError):
        logger.warning("Invalid job status", value=str(exc.value), path=request.url.path)
        record_error("invalid_status", "api")
        return error_response(400, str(exc))

    @app.exception_handler(InvalidReferenceError)
    async def invalid_reference_handler(request: Request, exc: InvalidReferenceError):
        logger.warning(
            "Invalid reference",
            reference=exc.reference,
            missing_ids=exc.missing_ids,
            path=request.url.path,
        )
        record_error("invalid_reference", "api")
        return error_response(400, str(exc), exc.missing_ids)

    @app.exception_handler(NotFoundError)
    async def not_found_handler(request: Request, exc: NotFoundError):
        logger.info("Not found", entity=exc.entity, path=request.url.path)
        record_error("not_found", "api")
        return error_response(404, str(exc))

    @app.exception_handler(AuthenticationError)
    async def authentication_error_handler(request: Request, exc: AuthenticationError):
        logger.info("Authentication failed", error=str(exc), path=request.url.path)
        record_error("authentication", "api")
        return error_response(401, str(exc), headers={"WWW-Authenticate": "Bearer"})

    @app.exception_handler(ForbiddenError)
    async def forbidden_handler(request: Request, exc: ForbiddenError):
        record_error("forbidden", "api")
        return error_response(403, str(exc))

    @app.exception_handler(TransitionNotAllowedError)
    async def transition_not_allowed_handler(
        request: Request, exc: TransitionNotAllowedError
    ):
        logger.warning(
            "Transition rejected",
            current_status=exc.current_status,
            requested_status=exc.requested_status,
            path=request.url.path,
        )
        record_error("transition_not_allowed", "api")
        return error_response(409, str(exc))

    @app.exception_handler(IntegrityError)
    async def integrity_error_handler(request: Request, exc: IntegrityError):
        logger.warning("Integrity error", error=str(exc.orig), path=request.url.path)
        record_error("integrity", "database")
        return error_response(400, "One or more referenced records do not exist")

    @app.exception_handler(SQLAlchemyError)
    async def database_error_handler(request: Request, exc: SQLAlchemyError):
        logger.error("Database error", error=str(exc), path=request.url.path)
        record_error("database", "database")
        return error_response(500, "A database error occurred")

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return error_response(exc.status_code, str(exc.detail), headers=exc.headers)

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        logger.error(
            "Unhandled exception",
            error=str(exc),
            path=request.url.path,
            traceback=traceback.format_exc(),
        )
        record_error("internal", "api")
        return error_response(500, "An unexpected error occurred")
