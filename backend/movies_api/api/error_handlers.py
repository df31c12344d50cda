"""Error Handlers: global exception handlers for the Movies API.

Invariants:
    - MoviesError → its own http_status, empty body, application/json
    - Exception (catch-all) → InternalError.to_response() envelope, 500, never leaks internal details

Design Decisions:
    - Two-layer handler: domain (MoviesError), catch-all (Exception)
    - Warning-severity errors are logged as warnings, without a traceback
"""

import logging

from fastapi import FastAPI, Request, Response
from fastapi.responses import JSONResponse

from movies_api.core.errors import (
    ErrorContext, ErrorSeverity, InternalError, MoviesError,
)

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_movies_error_handler(app)
    _register_generic_error_handler(app)


def _register_movies_error_handler(app: FastAPI) -> None:
    """Register domain error handler."""

    @app.exception_handler(MoviesError)
    async def movies_error_handler(request: Request, exc: MoviesError):
        """Handle all Movies API domain errors."""
        level = (
            logging.WARNING
            if exc.severity in (ErrorSeverity.INFO, ErrorSeverity.WARNING)
            else logging.ERROR
        )
        logger.log(
            level, exc.message,
            extra={"error_code": exc.code, "path": request.url.path},
        )
        return Response(
            status_code=exc.http_status, media_type="application/json",
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all: never leaks internal details."""
        error = InternalError(ErrorContext(path=request.url.path))
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
            extra={"error_code": error.code, "path": request.url.path},
        )
        return JSONResponse(
            status_code=error.http_status, content=error.to_response(),
        )
