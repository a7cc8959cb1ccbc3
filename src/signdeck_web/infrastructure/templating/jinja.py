# src/signdeck_web/infrastructure/templating/jinja.py
# Copyright (c) Signdeck.
# SPDX-License-Identifier: MIT
"""Jinja2 template rendering.

Summary:
    ``TemplateRenderer`` implementation over a Jinja2 environment. Page
    templates produce HTML responses; fragment templates produce the JSON text
    consumed by the fragment parser (use the ``tojson`` filter for values).

Layer:
    infrastructure/templating
"""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, select_autoescape
from starlette.responses import HTMLResponse, Response

from signdeck_web.config.settings import Settings
from signdeck_web.infrastructure.logging.logger import get_json_logger

_LOGGER = get_json_logger(__name__)


def build_environment(templates_dir: str | Path) -> Environment:
    """Create the Jinja2 environment for ``templates_dir``."""
    return Environment(
        loader=FileSystemLoader(str(templates_dir)),
        autoescape=select_autoescape(["html", "xml"]),
    )


class JinjaTemplateRenderer:
    """Render named templates from a Jinja2 environment."""

    __slots__ = ("_env",)

    def __init__(self, env: Environment) -> None:
        self._env = env

    @classmethod
    def from_settings(cls, settings: Settings) -> JinjaTemplateRenderer:
        """Build a renderer for ``TEMPLATES_DIR``."""
        return cls(build_environment(settings.templates_dir))

    @property
    def environment(self) -> Environment:
        """The underlying Jinja2 environment."""
        return self._env

    def render(self, name: str, context: Mapping[str, Any]) -> str:
        """Render ``name`` to text."""
        _LOGGER.debug("template_render", extra={"template": name})
        return self._env.get_template(name).render(dict(context))

    def render_page(self, name: str, context: Mapping[str, Any], status: int) -> Response:
        """Render ``name`` as an HTML page response."""
        return HTMLResponse(self.render(name, context), status_code=status)
