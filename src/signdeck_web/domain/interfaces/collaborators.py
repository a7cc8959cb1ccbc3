# src/signdeck_web/domain/interfaces/collaborators.py
# Copyright (c) Signdeck.
# SPDX-License-Identifier: MIT
"""Collaborator contracts consumed by controllers.

This module defines the protocols a controller calls while rendering:

* RequestAccessor: read-only parameter access plus the AJAX flag.
* TemplateRenderer: fragment (string) and full-page rendering.
* ApiResponder: emits API payloads; content negotiation is its concern.
* UserProvider, NavigationProvider, Clock: page chrome sources.
* UrlResolver: named route to URL resolution.

Implementations live in ``signdeck_web.infrastructure``; tests substitute
in-memory fakes.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from starlette.responses import Response


@runtime_checkable
class RequestAccessor(Protocol):
    """Read-only access to request parameters."""

    def get(self, name: str, default: Any = None) -> Any:
        """Return a (possibly nested) parameter value or ``default``."""
        raise NotImplementedError

    def get_int(self, name: str, default: int | None = None) -> int | None:
        """Return a parameter coerced to int, or ``default`` when absent/invalid."""
        raise NotImplementedError

    def is_ajax(self) -> bool:
        """Return True when the request was issued by client-side script."""
        raise NotImplementedError


class TemplateRenderer(Protocol):
    """Template engine facade."""

    def render(self, name: str, context: Mapping[str, Any]) -> str:
        """Render ``name`` with ``context`` and return the text."""
        raise NotImplementedError

    def render_page(self, name: str, context: Mapping[str, Any], status: int) -> Response:
        """Render ``name`` as a full HTML page response."""
        raise NotImplementedError


class ApiResponder(Protocol):
    """Emits API payloads with a status code."""

    def respond(self, payload: Any, status: int) -> Response:
        """Return a response carrying ``payload``."""
        raise NotImplementedError


class UserProvider(Protocol):
    """Source of the authenticated principal."""

    def current_user(self) -> Any:
        """Return the current user (opaque to controllers)."""
        raise NotImplementedError


class NavigationProvider(Protocol):
    """Source of the consolidated navigation menu."""

    def menu(self) -> Any:
        """Return the navigation structure for page chrome."""
        raise NotImplementedError


class Clock(Protocol):
    """Source of the page clock display string."""

    def clock(self) -> str:
        """Return the formatted current time."""
        raise NotImplementedError


class UrlResolver(Protocol):
    """Resolves named routes."""

    def __call__(self, route: str, /, **params: Any) -> str:
        """Return the URL for ``route`` with path ``params``."""
        raise NotImplementedError
