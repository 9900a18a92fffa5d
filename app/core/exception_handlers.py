"""Centralized exception handlers for the FastAPI app.

Register with register_exception_handlers(app). Maps domain and framework
exceptions to JSON error bodies {"error", "message", "trace_id"} where
trace_id is the request id set by RequestIDMiddleware.
"""

import logging
from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.config import get_settings
from app.domain.exceptions import DocumentApiException

logger = logging.getLogger(__name__)

# Map domain error_code to (HTTP status, public error code)
_ERROR_CODE_STATUS: dict[str, tuple[int, str]] = {
    "AUTHENTICATION_ERROR": (401, "unauthorized"),
    "PERMISSION_DENIED": (403, "forbidden"),
    "RETRIEVAL_FAILURE": (500, "internal_error"),
    "SERVICE_UNAVAILABLE": (503, "service_unavailable"),
}

_INTERNAL_ERROR_MESSAGE = "An unexpected error occurred."


def get_trace_id(request: Request) -> str | None:
    """Return the request id for this request, if the middleware set one."""
    return getattr(request.state, "request_id", None)


def error_response(
    request: Request,
    status_code: int,
    error: str,
    message: Any,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    """Build the standard error body for status_code."""
    return JSONResponse(
        status_code=status_code,
        content={"error": error, "message": message, "trace_id": get_trace_id(request)},
        headers=headers,
    )


def _document_api_exception_handler(
    request: Request, exc: DocumentApiException
) -> JSONResponse:
    """Return the mapped status; internal failures never expose details."""
    status, error = _ERROR_CODE_STATUS.get(exc.error_code, (400, "bad_request"))
    if status >= 500:
        logger.error(
            "%s on %s %s: %s (trace_id=%s)",
            exc.error_code,
            request.method,
            request.url.path,
            exc.details,
            get_trace_id(request),
        )
        message = exc.message if get_settings().debug else _INTERNAL_ERROR_MESSAGE
        return error_response(request, status, error, message)
    headers = {"WWW-Authenticate": "Bearer"} if status == 401 else None
    return error_response(request, status, error, exc.message, headers=headers)


def _validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Return 422 with validation error details."""
    return JSONResponse(
        status_code=422,
        content={
            "error": "validation_error",
            "message": "Request validation failed",
            "details": exc.errors(),
            "trace_id": get_trace_id(request),
        },
    )


def _http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Return JSON for Starlette HTTP exceptions (status + detail)."""
    return error_response(
        request, exc.status_code, "http_error", exc.detail, headers=exc.headers
    )


def _generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Return 500; include detail only when debug is True."""
    logger.exception("Unhandled exception: %s", exc)
    detail: Any = str(exc) if get_settings().debug else _INTERNAL_ERROR_MESSAGE
    return error_response(request, 500, "internal_error", detail)


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers on the FastAPI app.

    Call once after creating the app. Handlers: DocumentApiException (and
    subclasses), RequestValidationError, StarletteHTTPException, generic Exception.
    """
    app.add_exception_handler(DocumentApiException, _document_api_exception_handler)
    app.add_exception_handler(RequestValidationError, _validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, _http_exception_handler)
    app.add_exception_handler(Exception, _generic_exception_handler)
