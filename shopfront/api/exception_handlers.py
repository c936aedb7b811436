"""Centralized exception handlers.

Every failure reaches the client as ``{"error": message}`` with the status
of the error class that raised it.

Usage:
    app = FastAPI()
    setup_exception_handlers(app)
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from shopfront.core.errors import ShopfrontError

logger = logging.getLogger(__name__)


def _error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def _validation_message(exc: RequestValidationError) -> str:
    """First validation problem as ``field: reason``"""
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    first = errors[0]
    location = [str(part) for part in first.get("loc", ()) if part != "body"]
    reason = first.get("msg", "invalid value")
    if location:
        return f"{'.'.join(location)}: {reason}"
    return reason


def setup_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers on the application."""

    @app.exception_handler(ShopfrontError)
    async def shopfront_error_handler(request: Request, exc: ShopfrontError) -> JSONResponse:
        if exc.status_code >= 500:
            logger.error(
                "Failure on %s %s: %s",
                request.method, request.url.path, exc.message,
                exc_info=exc,
            )
        else:
            logger.info(
                "%s %s -> %d %s",
                request.method, request.url.path, exc.status_code, exc.message,
            )
        return _error_response(exc.status_code, exc.message)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        return _error_response(status.HTTP_400_BAD_REQUEST, _validation_message(exc))

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        if exc.status_code == status.HTTP_404_NOT_FOUND:
            message = "Not found"
        else:
            message = str(exc.detail)
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": message},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(SQLAlchemyError)
    async def database_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
        logger.error(
            "Database error on %s %s",
            request.method, request.url.path,
            exc_info=exc,
        )
        return _error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, f"Database error: {exc}")

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        """Anything not mapped above still answers in the ``{"error": ...}`` shape"""
        logger.error(
            "Unhandled exception on %s %s",
            request.method, request.url.path,
            exc_info=exc,
        )
        return _error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")
