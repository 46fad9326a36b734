"""Centralized exception handlers for the FastAPI app.

Register with register_exception_handlers(app). Maps domain, persistence and
framework exceptions to HTTP responses. Every error body has the same shape:
{"success": false, "error": <message>, "code": <error_code>, "details": {...}}.
"""

import logging
from typing import Any

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from slowapi.errors import RateLimitExceeded
from sqlalchemy.exc import IntegrityError
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.config import get_settings
from app.domain.exceptions import TaskboardException

logger = logging.getLogger(__name__)

# Map domain error_code to HTTP status. Caller-not-owner is reported as 401,
# the same as a missing or invalid token.
_ERROR_CODE_STATUS: dict[str, int] = {
    "VALIDATION_ERROR": 400,
    "AUTHENTICATION_ERROR": 401,
    "AUTHORIZATION_ERROR": 401,
    "RESOURCE_NOT_FOUND": 404,
    "CONFLICT": 409,
    "UPSTREAM_ERROR": 502,
}


def _error_body(
    message: Any, code: str, details: Any | None = None
) -> dict[str, Any]:
    return {
        "success": False,
        "error": message,
        "code": code,
        "details": details or {},
    }


def _taskboard_exception_handler(
    request: Request, exc: TaskboardException
) -> JSONResponse:
    """Return JSON from TaskboardException.to_dict() with appropriate status code."""
    status = _ERROR_CODE_STATUS.get(exc.error_code, 400)
    if status >= 500:
        logger.warning("Upstream failure on %s: %s", request.url.path, exc.message)
    return JSONResponse(
        status_code=status,
        content=exc.to_dict(),
    )


def _validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Return 400 with validation error details."""
    return JSONResponse(
        status_code=400,
        content=_error_body(
            "Request validation failed",
            "VALIDATION_ERROR",
            {"errors": jsonable_encoder(exc.errors())},
        ),
    )


def _integrity_exception_handler(
    request: Request, exc: IntegrityError
) -> JSONResponse:
    """Return 409 for referential-integrity or uniqueness failures on persist."""
    logger.info("Integrity error on %s: %s", request.url.path, exc.orig)
    return JSONResponse(
        status_code=409,
        content=_error_body("The change conflicts with existing data", "CONFLICT"),
    )


def _http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Return JSON for Starlette HTTP exceptions (status + detail)."""
    return JSONResponse(
        status_code=exc.status_code,
        content=_error_body(exc.detail, "HTTP_ERROR"),
        headers=getattr(exc, "headers", None),
    )


def _rate_limit_exception_handler(
    request: Request, exc: RateLimitExceeded
) -> JSONResponse:
    """Return 429 in the uniform body, keeping the limiter's rate headers."""
    response = JSONResponse(
        status_code=429,
        content=_error_body(f"Rate limit exceeded: {exc.detail}", "RATE_LIMITED"),
    )
    limiter = getattr(request.app.state, "limiter", None)
    view_rate_limit = getattr(request.state, "view_rate_limit", None)
    if limiter is not None and view_rate_limit is not None:
        response = limiter._inject_headers(response, view_rate_limit)
    return response


def _generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Return 500; include detail only when debug is True."""
    logger.exception("Unhandled exception: %s", exc)
    settings = get_settings()
    detail: Any = str(exc) if settings.debug else "Internal server error"
    return JSONResponse(
        status_code=500,
        content=_error_body(detail, "INTERNAL_ERROR"),
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers on the FastAPI app.

    Call once after creating the app. Handlers: TaskboardException (and
    subclasses), RequestValidationError, IntegrityError, RateLimitExceeded,
    StarletteHTTPException, generic Exception.
    """
    app.add_exception_handler(TaskboardException, _taskboard_exception_handler)
    app.add_exception_handler(RequestValidationError, _validation_exception_handler)
    app.add_exception_handler(IntegrityError, _integrity_exception_handler)
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exception_handler)
    app.add_exception_handler(StarletteHTTPException, _http_exception_handler)
    app.add_exception_handler(Exception, _generic_exception_handler)
