"""Error Handlers — global exception handlers mapping failures onto {"msg": ...} bodies.

Invariants:
    - GameReviewsError → its own http_status and message
    - Unmatched routes (404) and unmatched methods (405) → 404 "Invalid URL"
    - RequestValidationError → 400 "Invalid input"
    - Exception (catch-all) → 500, never leaks internal details

Design Decisions:
    - Four-layer handler: domain, routing (Starlette HTTPException), validation, catch-all
    - Extracted from main.py so the app module stays a thin assembly
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from game_reviews.core.errors import (
    GameReviewsError, InvalidInputError, RouteNotFoundError,
)

logger = logging.getLogger(__name__)

_UNMATCHED_ROUTE_STATUSES = {
    status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED,
}


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_domain_error_handler(app)
    _register_http_exception_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _error_response(exc: GameReviewsError) -> JSONResponse:
    return JSONResponse(status_code=exc.http_status, content=exc.to_response())


def _register_domain_error_handler(app: FastAPI) -> None:
    """Register domain/infrastructure error handler."""

    @app.exception_handler(GameReviewsError)
    async def domain_error_handler(request: Request, exc: GameReviewsError):
        level = logging.ERROR if exc.http_status >= 500 else logging.WARNING
        logger.log(
            level,
            f"{type(exc).__name__}: {exc.message}",
            extra={
                "error_code": exc.code,
                "path": request.url.path,
                "method": request.method,
            },
        )
        return _error_response(exc)


def _register_http_exception_handler(app: FastAPI) -> None:
    """Register routing error handler (no route matched)."""

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(
        request: Request, exc: StarletteHTTPException,
    ):
        if exc.status_code in _UNMATCHED_ROUTE_STATUSES:
            logger.info(
                f"No route for {request.method} {request.url.path}",
                extra={"error_code": "ROUTE_NOT_FOUND", "path": request.url.path},
            )
            return _error_response(RouteNotFoundError())
        return JSONResponse(
            status_code=exc.status_code,
            content={"msg": str(exc.detail)},
            headers=getattr(exc, "headers", None),
        )


def _register_validation_error_handler(app: FastAPI) -> None:
    """Register Pydantic validation error handler."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
        )
        errors = exc.errors()
        field = str(errors[0]["loc"][-1]) if errors and errors[0]["loc"] else "request"
        return _error_response(InvalidInputError(field))


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"msg": "Internal server error"},
        )
