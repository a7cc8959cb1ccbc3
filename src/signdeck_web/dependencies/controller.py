# Copyright (c) Signdeck.
# SPDX-License-Identifier: MIT
"""Dependency wiring for controllers.

Purpose:
    Assemble a :class:`ControllerContext` for each request from the shared
    objects :func:`signdeck_web.main.create_app` stores on ``app.state``
    (settings, template renderer, navigation) and from the request itself.

Layer:
    dependencies

Example:
    @router.get("/layouts")
    async def layouts(ctx: ControllerContext = Depends(get_controller_context)):
        return LayoutController(ctx).grid()
"""

from __future__ import annotations

from fastapi import Request

from signdeck_web.adapters.controllers.base import ControllerContext
from signdeck_web.config.settings import Settings, get_settings
from signdeck_web.domain.entities.application_state import ApplicationState
from signdeck_web.infrastructure.clock.system_clock import SystemClock
from signdeck_web.infrastructure.http.collaborators import (
    JsonApiResponder,
    RequestUrlResolver,
    RequestUserProvider,
    StaticNavigationProvider,
    request_flash,
)
from signdeck_web.infrastructure.http.request_params import StarletteRequestAccessor
from signdeck_web.infrastructure.templating.jinja import JinjaTemplateRenderer


def _app_settings(request: Request) -> Settings:
    settings = getattr(request.app.state, "settings", None)
    return settings if isinstance(settings, Settings) else get_settings()


async def get_controller_context(request: Request) -> ControllerContext:
    """Build the per-request controller context.

    A fresh :class:`ApplicationState` is created for every request.
    """
    settings = _app_settings(request)
    app_state = request.app.state

    renderer = getattr(app_state, "renderer", None) or JinjaTemplateRenderer.from_settings(settings)
    navigation = getattr(app_state, "navigation", None) or StaticNavigationProvider()
    clock = getattr(app_state, "clock", None) or SystemClock.from_settings(settings)

    return ControllerContext(
        request=await StarletteRequestAccessor.from_request(request),
        renderer=renderer,
        api=JsonApiResponder(),
        users=RequestUserProvider(request),
        navigation=navigation,
        clock=clock,
        surface=settings.app_surface,
        state=ApplicationState(),
        template_extension=settings.template_extension,
        grid_default_length=settings.grid_default_length,
        flash=request_flash(request),
        url_resolver=RequestUrlResolver(request),
    )
