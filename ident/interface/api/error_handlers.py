"""Global exception handlers rendering Matrix error bodies.

Client errors carry their own ``errcode`` and message. Anything else is
logged in full and answered with a generic 500 that leaks no detail.
"""

import logging

import logfire
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from ident.adapter.error import AdapterError
from ident.domain.error import DomainError, StorageError

logger = logging.getLogger(__name__)


def matrix_error(status_code: int, errcode: str, error: str) -> JSONResponse:
    """Build a Matrix ``{"errcode", "error"}`` response."""
    return JSONResponse(
        status_code=status_code,
        content={"errcode": errcode, "error": error},
    )


def internal_error() -> JSONResponse:
    return matrix_error(
        status.HTTP_500_INTERNAL_SERVER_ERROR, "M_UNKNOWN", "Internal server error"
    )


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""

    @app.exception_handler(DomainError)
    async def domain_error_handler(request: Request, exc: DomainError):
        logfire.info(
            "Request rejected",
            path=request.url.path,
            errcode=exc.errcode,
            error=exc.message,
        )
        return matrix_error(exc.http_status, exc.errcode, exc.message)

    @app.exception_handler(StorageError)
    async def storage_error_handler(request: Request, exc: StorageError):
        logfire.error(
            "Storage failure",
            path=request.url.path,
            error=exc.message,
            error_type=type(exc).__name__,
        )
        logger.error("Storage failure on %s: %s", request.url.path, exc)
        return internal_error()

    @app.exception_handler(AdapterError)
    async def adapter_error_handler(request: Request, exc: AdapterError):
        logfire.error(
            "External service failure",
            path=request.url.path,
            error=str(exc),
            error_type=type(exc).__name__,
        )
        logger.error("External service failure on %s: %s", request.url.path, exc)
        return internal_error()

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError
    ):
        errors = exc.errors()
        logger.warning("Validation error on %s: %s", request.url.path, errors)
        message = errors[0]["msg"] if errors else "Invalid request"
        return matrix_error(status.HTTP_400_BAD_REQUEST, "M_INVALID_PARAM", message)

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        if exc.status_code == status.HTTP_404_NOT_FOUND:
            return matrix_error(exc.status_code, "M_NOT_FOUND", "Unrecognised request")
        if exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED:
            return matrix_error(exc.status_code, "M_UNRECOGNIZED", "Unrecognised request")
        return matrix_error(exc.status_code, "M_UNKNOWN", str(exc.detail))

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        logfire.error(
            "Unhandled exception",
            path=request.url.path,
            error=str(exc),
            error_type=type(exc).__name__,
        )
        logger.error(
            "Unhandled exception on %s: %s", request.url.path, exc, exc_info=True
        )
        return internal_error()
