"""
Exception Handlers for the FastAPI Application.

This module registers two handlers:

- ``store_error_handler`` translates the sentinel errors raised by the stores
  into HTTP status codes with a short JSON body.
- ``global_exception_handler`` catches everything else, logs detailed
  information including an error ID and request context, and returns 500.
"""

import traceback
from typing import Dict, Type

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from panelhub.core.errors import (
    CommandValidationError,
    DataSourceAlreadyExistsError,
    NotFoundError,
    PanelhubError,
    SourceDataSourceReadOnlyError,
)
from panelhub.core.logging_config import get_logger

logger = get_logger(__name__)

# Checked in order, so subclasses must come before their bases.
ERROR_STATUS_CODES: Dict[Type[PanelhubError], int] = {
    NotFoundError: status.HTTP_404_NOT_FOUND,
    SourceDataSourceReadOnlyError: status.HTTP_403_FORBIDDEN,
    CommandValidationError: status.HTTP_400_BAD_REQUEST,
    DataSourceAlreadyExistsError: status.HTTP_409_CONFLICT,
}


def status_code_for(exc: PanelhubError) -> int:
    """Map a store error to its HTTP status code (500 when unmapped)."""
    for error_type, code in ERROR_STATUS_CODES.items():
        if isinstance(exc, error_type):
            return code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


async def store_error_handler(request: Request, exc: PanelhubError) -> JSONResponse:
    """
    Translate a store error into a JSON response.

    Args:
        request: The HTTP request that caused the exception
        exc: The store error that was raised

    Returns:
        JSONResponse with the error message and type
    """
    status_code = status_code_for(exc)
    log = logger.error if status_code >= 500 else logger.info
    log(f"{request.method} {request.url.path} failed with {type(exc).__name__}: {exc}")
    return JSONResponse(
        status_code=status_code,
        content={
            "message": str(exc),
            "error_type": type(exc).__name__,
        },
    )


async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Global exception handler to log detailed error information.

    This handler is called for any unhandled exception in the application.
    It logs the full error context and returns a JSON response with an error ID
    that clients can use to reference the error when reporting issues.

    Args:
        request: The HTTP request that caused the exception
        exc: The exception that was raised

    Returns:
        JSONResponse with error details and error ID
    """
    error_id = id(exc)

    logger.error(
        f"Unhandled exception [{error_id}] in {request.method} {request.url.path}: {str(exc)}",
        exc_info=True,
        extra={
            "error_id": error_id,
            "method": request.method,
            "path": request.url.path,
            "query_params": dict(request.query_params),
            "client": request.client.host if request.client else "unknown",
            "error_type": type(exc).__name__,
            "traceback": traceback.format_exc(),
        },
    )

    return JSONResponse(
        status_code=500,
        content={
            "detail": "Internal server error",
            "error_id": error_id,
            "error_type": type(exc).__name__,
        },
    )


def setup_exception_handlers(app: FastAPI) -> None:
    """
    Register exception handlers with the FastAPI application.

    This function should be called during application initialization to set up
    all custom exception handlers.

    Args:
        app: The FastAPI application instance
    """
    app.add_exception_handler(PanelhubError, store_error_handler)
    app.add_exception_handler(Exception, global_exception_handler)
    logger.debug("Exception handlers registered successfully")
