"""
Error handlers mapping domain exceptions to HTTP responses.
"""

import traceback

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from repairtrack.config.logging import get_logger
from repairtrack.domain.exceptions.repository_error import (
    JobNotFoundError,
    RepositoryError,
)
from repairtrack.domain.exceptions.session_error import (
    SessionNotFoundError,
    SubmissionInProgressError,
)
from repairtrack.domain.exceptions.validation_error import ValidationError

logger = get_logger(__name__)


def _error_response(status_code: int, error: str, message: str, error_type: str):
    return JSONResponse(
        status_code=status_code,
        content={"error": error, "message": message, "type": error_type},
    )


def add_error_handlers(app: FastAPI) -> None:
    """Add custom error handlers to FastAPI app."""

    @app.exception_handler(ValidationError)
    async def validation_error_handler(request: Request, exc: ValidationError):
        logger.warning("Validation error", error=str(exc), path=request.url.path)
        return _error_response(400, "Validation Error", str(exc), "validation_error")

    @app.exception_handler(SessionNotFoundError)
    async def session_error_handler(request: Request, exc: SessionNotFoundError):
        logger.info("Request without a valid session", path=request.url.path)
        return _error_response(401, "Unauthorized", str(exc), "session_error")

    @app.exception_handler(SubmissionInProgressError)
    async def submission_in_progress_handler(
        request: Request, exc: SubmissionInProgressError
    ):
        logger.warning("Submission already in progress", path=request.url.path)
        return _error_response(409, "Conflict", str(exc), "submission_in_progress")

    @app.exception_handler(JobNotFoundError)
    async def job_not_found_handler(request: Request, exc: JobNotFoundError):
        logger.info("Job not found", error=str(exc), path=request.url.path)
        return _error_response(404, "Not Found", str(exc), "not_found")

    @app.exception_handler(RepositoryError)
    async def repository_error_handler(request: Request, exc: RepositoryError):
        logger.error("Repository error", error=str(exc), path=request.url.path)
        return _error_response(
            500, "Database Error", "A database error occurred", "database_error"
        )

    @app.exception_handler(SQLAlchemyError)
    async def database_error_handler(request: Request, exc: SQLAlchemyError):
        logger.error("Database error", error=str(exc), path=request.url.path)
        return _error_response(
            500, "Database Error", "A database error occurred", "database_error"
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return _error_response(exc.status_code, "HTTP Error", exc.detail, "http_error")

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        logger.error(
            "Unhandled exception",
            error=str(exc),
            path=request.url.path,
            traceback=traceback.format_exc(),
        )
        return _error_response(
            500, "Internal Server Error", "An unexpected error occurred", "internal_error"
        )
