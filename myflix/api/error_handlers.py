"""
Exception Handlers
==================

Maps application exceptions to HTTP responses so controllers stay free of
try/except blocks.

    ValidationFailedError   → 422 {"errors": [...]}
    RequestValidationError  → 422 {"errors": [...]} (request schema violations)
    InvalidIdentifierError  → 400
    AuthenticationError     → 401
    NotFoundError           → 404
    ConflictError           → 409
    Exception (fallback)    → 500, details logged only
"""
import logging
from typing import Any, Dict, List

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, PlainTextResponse

from myflix.domain.exceptions import (
    AuthenticationError,
    ConflictError,
    InvalidIdentifierError,
    NotFoundError,
    ValidationFailedError,
)

logger = logging.getLogger(__name__)

# Request parts that prefix pydantic error locations
_LOCATION_ROOTS = ("body", "path", "query", "header", "cookie")


def request_errors(exc: RequestValidationError) -> List[Dict[str, Any]]:
    """Flatten pydantic errors into the {field, message, value} items used by every 422."""
    errors = []
    for error in exc.errors():
        loc = [str(part) for part in error.get("loc", ())]
        field = ".".join(loc[1:] if loc and loc[0] in _LOCATION_ROOTS and len(loc) > 1 else loc)
        value = error.get("input")
        if field.endswith("password"):
            value = None
        errors.append({"field": field, "message": error.get("msg", "Invalid value."), "value": value})
    return errors


def register_exception_handlers(app: FastAPI) -> None:
    """Register global exception handlers on the application."""

    @app.exception_handler(ValidationFailedError)
    async def handle_validation_failed(request: Request, exc: ValidationFailedError):
        return JSONResponse(
            status_code=422,
            content={"errors": exc.errors},
        )

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(request: Request, exc: RequestValidationError):
        return JSONResponse(
            status_code=422,
            content=jsonable_encoder({"errors": request_errors(exc)}),
        )

    @app.exception_handler(InvalidIdentifierError)
    async def handle_invalid_identifier(request: Request, exc: InvalidIdentifierError):
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"detail": exc.message})

    @app.exception_handler(AuthenticationError)
    async def handle_authentication(request: Request, exc: AuthenticationError):
        return JSONResponse(
            status_code=status.HTTP_401_UNAUTHORIZED,
            content={"detail": exc.message},
            headers={"WWW-Authenticate": "Bearer"},
        )

    @app.exception_handler(NotFoundError)
    async def handle_not_found(request: Request, exc: NotFoundError):
        return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"detail": exc.message})

    @app.exception_handler(ConflictError)
    async def handle_conflict(request: Request, exc: ConflictError):
        logger.warning(f"Conflict on {request.method} {request.url.path}: {exc.message}")
        return JSONResponse(status_code=status.HTTP_409_CONFLICT, content={"detail": exc.message})

    @app.exception_handler(Exception)
    async def handle_unexpected(request: Request, exc: Exception):
        # Database failures land here too; they are not classified further
        logger.error(f"Unhandled error on {request.method} {request.url.path}: {exc}", exc_info=exc)
        return PlainTextResponse(
            "Oopps! Something Broke!",
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )
