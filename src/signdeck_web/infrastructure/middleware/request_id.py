# src/signdeck_web/infrastructure/middleware/request_id.py
# Copyright (c) Signdeck.
# SPDX-License-Identifier: MIT
"""Request correlation.

Summary:
    Gives every request a correlation id. A well-formed caller-supplied
    ``X-Request-ID`` is reused, anything else is replaced by a fresh UUID4.
    The id is echoed on the response, exposed as ``request.state.request_id``
    (error envelopes report it as ``trace_id``) and bound to the logging
    context while the request is handled.
"""

from __future__ import annotations

import re
import uuid
from typing import Final

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from signdeck_web.infrastructure.logging.logger import request_context

_REQUEST_ID_HEADER: Final[str] = "X-Request-ID"
_SAFE_RE: Final[re.Pattern[str]] = re.compile(r"^[A-Za-z0-9\-_.:@]{1,128}$")


def _coerce_request_id(raw: str | None) -> str:
    """Return ``raw`` when it is a usable id, otherwise a new UUID4 string."""
    if raw is not None and _SAFE_RE.fullmatch(raw):
        return raw
    return str(uuid.uuid4())


class RequestIdMiddleware(BaseHTTPMiddleware):
    """Attach a correlation id to the request, its logs and its response."""

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        request_id = _coerce_request_id(request.headers.get(_REQUEST_ID_HEADER))
        request.state.request_id = request_id

        with request_context(request_id):
            response = await call_next(request)

        if _REQUEST_ID_HEADER not in response.headers:
            response.headers[_REQUEST_ID_HEADER] = request_id
        return response
