# src/signdeck_web/infrastructure/http/errors.py
# Copyright (c) Signdeck.
# SPDX-License-Identifier: MIT
"""HTTP exception handlers.

Anything that escapes a controller leaves the process as

    {"error": {"code", "http_status", "message", "details"?, "trace_id"?}}

where ``trace_id`` is the request correlation id. Controller wiring faults
(:class:`ControllerNotImplemented` and its subclasses) are server errors and
keep their own code, e.g. ``TEMPLATE_MISSING``.
"""

from __future__ import annotations

from typing import Any

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException
from starlette.responses import Response

from signdeck_web.domain.exceptions.controller import ControllerNotImplemented
from signdeck_web.infrastructure.logging.logger import get_json_logger

_LOGGER = get_json_logger(__name__)


def error_envelope(
    *,
    code: str,
    http_status: int,
    message: str,
    details: dict[str, Any] | None = None,
    trace_id: str | None = None,
) -> dict[str, Any]:
    """Build the error body; ``details`` and ``trace_id`` only when given."""
    body: dict[str, Any] = {"code": code, "http_status": http_status, "message": message}
    if details is not None:
        body["details"] = details
    if trace_id is not None:
        body["trace_id"] = trace_id
    return {"error": body}


def _error_response(
    request: Request,
    *,
    code: str,
    status: int,
    message: str,
    details: dict[str, Any] | None = None,
) -> Response:
    trace_id = getattr(request.state, "request_id", None)
    return JSONResponse(
        status_code=status,
        content=error_envelope(
            code=code,
            http_status=status,
            message=message,
            details=details,
            trace_id=trace_id,
        ),
    )


async def handle_controller_error(request: Request, exc: ControllerNotImplemented) -> Response:
    """Map controller wiring and template faults to 500."""
    _LOGGER.error(
        "controller_not_implemented",
        extra={
            "code": exc.code,
            "reason": exc.message,
            "path": request.url.path,
            "details": exc.details,
        },
    )
    return _error_response(
        request,
        code=exc.code,
        status=500,
        message=exc.message,
        details=exc.details or None,
    )


async def handle_validation_error(request: Request, exc: RequestValidationError) -> Response:
    """Map malformed path or query parameters to 422."""
    return _error_response(
        request,
        code="VALIDATION_ERROR",
        status=422,
        message="Request validation failed",
        details={"errors": _jsonable_errors(exc)},
    )


async def handle_http_exception(request: Request, exc: HTTPException) -> Response:
    """Keep the status of explicit HTTP errors (404 for unknown routes, ...)."""
    detail_is_text = isinstance(exc.detail, str)
    return _error_response(
        request,
        code="HTTP_ERROR",
        status=exc.status_code,
        message=exc.detail if detail_is_text else "HTTP error",
        details=None if detail_is_text else {"detail": exc.detail},
    )


async def handle_unhandled_exception(request: Request, exc: Exception) -> Response:
    """Last resort: log the traceback and answer 500 without internals."""
    _LOGGER.exception("unhandled_exception", extra={"path": request.url.path})
    return _error_response(
        request,
        code="INTERNAL_ERROR",
        status=500,
        message="Internal server error",
    )


def _jsonable_errors(exc: RequestValidationError) -> list[dict[str, Any]]:
    """Return validation errors without the non-serializable ``ctx``/``input`` members."""
    return [
        {key: value for key, value in error.items() if key in ("type", "loc", "msg")}
        for error in exc.errors()
    ]
