"""
Exception handlers - Translate domain errors into tagged JSON responses.

Body shape for every error: {"error": <message>, "kind": <kind>}
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from chatline.domain.exceptions import DomainError

logger = logging.getLogger(__name__)

STATUS_BY_KIND = {
    "Unauthenticated": status.HTTP_401_UNAUTHORIZED,
    "NotFound": status.HTTP_404_NOT_FOUND,
    "Forbidden": status.HTTP_403_FORBIDDEN,
    "Conflict": status.HTTP_409_CONFLICT,
    "InvalidInput": status.HTTP_400_BAD_REQUEST,
    "InvalidOperation": status.HTTP_400_BAD_REQUEST,
    "Internal": status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def _correlation_id(request: Request) -> str:
    return getattr(request.state, "correlation_id", "-")


def error_response(status_code: int, message: str, kind: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message, "kind": kind})


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(DomainError)
    async def domain_exception_handler(request: Request, exc: DomainError):
        status_code = STATUS_BY_KIND.get(exc.kind, status.HTTP_500_INTERNAL_SERVER_ERROR)
        logger.info(
            "%s %s -> %d %s: %s",
            request.method,
            request.url.path,
            status_code,
            exc.kind,
            exc.message,
            extra={"correlation_id": _correlation_id(request)},
        )
        return error_response(status_code, exc.message, exc.kind)

    # Validation error handler - malformed bodies, missing form fields
    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        errors = exc.errors()
        logger.info(
            "Validation error on %s: %s",
            request.url.path,
            errors,
            extra={"correlation_id": _correlation_id(request)},
        )
        return error_response(
            status.HTTP_400_BAD_REQUEST, "Invalid input", "InvalidInput"
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        kind = {
            status.HTTP_401_UNAUTHORIZED: "Unauthenticated",
            status.HTTP_403_FORBIDDEN: "Forbidden",
            status.HTTP_404_NOT_FOUND: "NotFound",
        }.get(exc.status_code, "InvalidInput" if exc.status_code < 500 else "Internal")
        return error_response(exc.status_code, str(exc.detail), kind)

    # Global exception handler
    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        logger.exception(
            "Unhandled error on %s %s",
            request.method,
            request.url.path,
            extra={"correlation_id": _correlation_id(request)},
        )
        return error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error", "Internal"
        )
