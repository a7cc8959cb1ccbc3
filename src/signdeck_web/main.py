# src/signdeck_web/main.py
# Copyright (c) Signdeck.
# SPDX-License-Identifier: MIT
"""
Application Entry (Adapters Bootstrap)

Synopsis:
    FastAPI bootstrap that wires logging, middleware, exception handlers and
    the shared view collaborators. Provides an application factory
    (`create_app`); routers are mounted by the embedding application.

Design:
    • Bootstrap only (no business logic).
    • Root JSON logging configured once, honouring LOG_LEVEL.
    • Template renderer, navigation and clock are built once and stored on
      ``app.state`` for :func:`get_controller_context`.
    • Controller errors map to 500 error envelopes.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException

from signdeck_web.config.settings import Settings, get_settings
from signdeck_web.domain.exceptions.controller import ControllerNotImplemented
from signdeck_web.infrastructure.clock.system_clock import SystemClock
from signdeck_web.infrastructure.http.collaborators import StaticNavigationProvider
from signdeck_web.infrastructure.http.errors import (
    handle_controller_error,
    handle_http_exception,
    handle_unhandled_exception,
    handle_validation_error,
)
from signdeck_web.infrastructure.logging.logger import (
    configure_root_logging,
    get_json_logger,
)
from signdeck_web.infrastructure.middleware.request_id import RequestIdMiddleware
from signdeck_web.infrastructure.templating.jinja import JinjaTemplateRenderer

logger = get_json_logger(__name__)


def create_app(
    settings: Settings | None = None,
    *,
    navigation: Sequence[Any] = (),
) -> FastAPI:
    """Build the FastAPI application.

    Args:
        settings: Explicit settings; defaults to :func:`get_settings`.
        navigation: Consolidated navigation menu shown on full pages.

    Returns:
        FastAPI: Configured application without routers.
    """
    settings = settings or get_settings()
    configure_root_logging(settings.log_level)

    app = FastAPI(title="Signdeck Web")
    app.state.settings = settings
    app.state.renderer = JinjaTemplateRenderer.from_settings(settings)
    app.state.navigation = StaticNavigationProvider(navigation)
    app.state.clock = SystemClock.from_settings(settings)

    app.add_middleware(RequestIdMiddleware)

    app.add_exception_handler(ControllerNotImplemented, handle_controller_error)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, handle_validation_error)  # type: ignore[arg-type]
    app.add_exception_handler(HTTPException, handle_http_exception)  # type: ignore[arg-type]
    app.add_exception_handler(Exception, handle_unhandled_exception)

    logger.info(
        "app_created",
        extra={
            "environment": settings.environment.value,
            "app_surface": settings.app_surface,
            "templates_dir": settings.templates_dir,
        },
    )
    return app
