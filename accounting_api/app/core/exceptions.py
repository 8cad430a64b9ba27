"""
Custom exceptions and error handlers for consistent error responses.

Every error leaves the API as JSON ``{"error": ..., "error_code": ...}``.
"""

import logging

from fastapi import Request, status
from starlette.exceptions import HTTPException
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from typing import Any, Dict, List

logger = logging.getLogger("accounting_api")

GENERIC_ERROR_MESSAGE = "Internal server error"


class AppException(Exception):
    """Base application exception."""

    def __init__(self, message: str, error_code: str, status_code: int = 500, details: Dict[str, Any] = None):
        self.message = message
        self.error_code = error_code
        self.status_code = status_code
        self.details = details or {}
        super().__init__(message)


class ValidationError(AppException):
    """Raised when a required query parameter is missing or malformed."""

    def __init__(self, message: str, fields: List[str] = None):
        super().__init__(
            message=message,
            error_code="ERR_VALIDATION",
            status_code=status.HTTP_400_BAD_REQUEST,
            details={"fields": fields or []}
        )


class DataAccessError(AppException):
    """Raised when the database cannot be reached or a query fails."""

    def __init__(self, message: str = GENERIC_ERROR_MESSAGE):
        super().__init__(
            message=message,
            error_code="ERR_DATA_ACCESS",
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR
        )


def _error_response(status_code: int, message: str, error_code: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"error": message, "error_code": error_code}
    )


# Global Exception Handlers

async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
    """Handler for custom application exceptions."""
    return _error_response(exc.status_code, exc.message, exc.error_code)


async def http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
    """Handler for FastAPI HTTPException with standardized format."""
    error_code_map = {
        400: "ERR_BAD_REQUEST",
        404: "ERR_NOT_FOUND",
        405: "ERR_METHOD_NOT_ALLOWED",
        500: "ERR_INTERNAL_SERVER"
    }

    error_code = error_code_map.get(exc.status_code, "ERR_UNKNOWN")
    return _error_response(exc.status_code, str(exc.detail), error_code)


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Handler for request validation errors raised by FastAPI itself."""
    fields = [".".join(str(part) for part in err.get("loc", ())[1:]) for err in exc.errors()]
    message = "Invalid request parameters"
    if fields:
        message = f"{message}: {', '.join(fields)}"
    return _error_response(status.HTTP_400_BAD_REQUEST, message, "ERR_VALIDATION")


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handler for unhandled exceptions."""
    logger.exception("Unhandled exception on %s %s", request.method, request.url.path)
    return _error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        GENERIC_ERROR_MESSAGE,
        "ERR_INTERNAL_SERVER"
    )
