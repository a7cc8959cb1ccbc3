# src/signdeck_web/infrastructure/logging/logger.py
# Copyright (c) Signdeck.
# SPDX-License-Identifier: MIT
"""JSON log lines for the controller layer.

Every record becomes one JSON object. The fixed part is ``ts``, ``level``,
``logger`` and ``message``; the request id of the current request is added
when known, then exception fields, then whatever the call site passed through
``extra=`` (``template``, ``controller``, ``status_code`` ...).

Usage:
    configure_root_logging(settings.log_level)
    _LOGGER = get_json_logger(__name__)
    _LOGGER.info("app_created", extra={"app_surface": "web"})
"""

from __future__ import annotations

import json
import logging
import os
from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from datetime import UTC, datetime
from typing import IO, Any

__all__ = [
    "JsonLogFormatter",
    "configure_root_logging",
    "get_json_logger",
    "get_request_id",
    "request_context",
]

_FALLBACK_REQUEST_ID_ENV = "REQUEST_ID"

_request_id: ContextVar[str | None] = ContextVar("signdeck_request_id", default=None)

# Names present on every LogRecord; anything else came in through ``extra=``.
_STANDARD_RECORD_FIELDS = frozenset(
    vars(logging.LogRecord("", logging.INFO, "", 0, "", (), None))
) | {"message", "asctime", "request_id", "taskName"}


def get_request_id() -> str | None:
    """Return the request id bound to the running task."""
    return _request_id.get()


@contextmanager
def request_context(request_id: str) -> Iterator[None]:
    """Bind ``request_id`` for the duration of the block, then restore."""
    token = _request_id.set(request_id)
    try:
        yield
    finally:
        _request_id.reset(token)


class JsonLogFormatter(logging.Formatter):
    """Render log records as single-line JSON objects."""

    def format(self, record: logging.LogRecord) -> str:
        line: dict[str, Any] = {
            "ts": datetime.fromtimestamp(record.created, tz=UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        request_id = self._request_id_for(record)
        if request_id:
            line["request_id"] = request_id

        if record.exc_info:
            exc_type, exc_value, _ = record.exc_info
            if exc_type is not None:
                line["exc_type"] = exc_type.__name__
            if exc_value is not None:
                line["exc_message"] = str(exc_value)

        for name, value in vars(record).items():
            if name not in _STANDARD_RECORD_FIELDS:
                line.setdefault(name, value)

        return json.dumps(line, ensure_ascii=False, separators=(",", ":"), default=str)

    @staticmethod
    def _request_id_for(record: logging.LogRecord) -> str | None:
        # Explicit record attribute, then the task context, then the process env.
        return (
            getattr(record, "request_id", None)
            or _request_id.get()
            or os.getenv(_FALLBACK_REQUEST_ID_ENV)
        )


def configure_root_logging(level: str | int | None = None, *, stream: IO[str] | None = None) -> None:
    """Set the root level and install the JSON handler once.

    Args:
        level: Level or level name. Falls back to ``LOG_LEVEL`` then ``INFO``.
        stream: Handler stream; ``sys.stderr`` when omitted.
    """
    if level is None:
        level = os.getenv("LOG_LEVEL") or "INFO"
    if isinstance(level, str):
        level = level.upper()

    root = logging.getLogger()
    root.setLevel(level)

    # Something (an earlier call, a test runner, uvicorn) already owns output.
    if root.handlers:
        return

    handler = logging.StreamHandler(stream)
    handler.setFormatter(JsonLogFormatter())
    root.addHandler(handler)


def get_json_logger(name: str) -> logging.Logger:
    """Return the logger for ``name``; records propagate to the root JSON handler."""
    logger = logging.getLogger(name)
    logger.propagate = True
    return logger
