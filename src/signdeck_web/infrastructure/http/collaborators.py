# src/signdeck_web/infrastructure/http/collaborators.py
# Copyright (c) Signdeck.
# SPDX-License-Identifier: MIT
"""Starlette-backed controller collaborators.

Summary:
    Concrete implementations of the controller collaborator protocols that
    read from the current Starlette request or from static configuration.

Layer:
    infrastructure/http
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from fastapi.encoders import jsonable_encoder
from starlette.requests import Request
from starlette.responses import JSONResponse, Response


class JsonApiResponder:
    """Emit API payloads as JSON."""

    __slots__ = ()

    def respond(self, payload: Any, status: int) -> Response:
        """Return a JSON response with ``status``."""
        return JSONResponse(jsonable_encoder(payload), status_code=status)


class RequestUserProvider:
    """Read the principal that authentication middleware left on ``request.state``."""

    __slots__ = ("_request",)

    def __init__(self, request: Request) -> None:
        self._request = request

    def current_user(self) -> Any:
        """Return ``request.state.user`` or ``None`` for anonymous requests."""
        return getattr(self._request.state, "user", None)


class StaticNavigationProvider:
    """Serve a navigation menu computed once at startup."""

    __slots__ = ("_menu",)

    def __init__(self, menu: Sequence[Any] = ()) -> None:
        self._menu = list(menu)

    def menu(self) -> list[Any]:
        """Return a copy of the menu so templates cannot mutate the shared one."""
        return list(self._menu)


class RequestUrlResolver:
    """Resolve named routes against the current request's router."""

    __slots__ = ("_request",)

    def __init__(self, request: Request) -> None:
        self._request = request

    def __call__(self, route: str, /, **params: Any) -> str:
        """Return the absolute URL for ``route``."""
        return str(self._request.url_for(route, **params))


def request_flash(request: Request) -> dict[str, str]:
    """Return flash messages left on ``request.state.flash`` (if any)."""
    flash = getattr(request.state, "flash", None)
    if isinstance(flash, dict):
        return {str(key): str(value) for key, value in flash.items()}
    return {}
