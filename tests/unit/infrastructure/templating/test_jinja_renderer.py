# Copyright (c) Signdeck.
# SPDX-License-Identifier: MIT
"""Unit tests for the Jinja2 template renderer."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from jinja2 import TemplateNotFound

from signdeck_web.config.settings import Settings
from signdeck_web.infrastructure.templating.jinja import JinjaTemplateRenderer, build_environment


def test_render_page_returns_html_response(settings: Settings) -> None:
    renderer = JinjaTemplateRenderer.from_settings(settings)

    response = renderer.render_page(
        "layout.html",
        {"title": "Layouts", "navigation": [{"title": "Displays"}], "clock": "09:30"},
        404,
    )

    assert response.status_code == 404
    assert response.headers["content-type"].startswith("text/html")
    body = response.body.decode()
    assert "<h1>Layouts</h1>" in body
    assert "Displays" in body
    assert "09:30" in body


def test_html_templates_autoescape(templates_dir: Path) -> None:
    renderer = JinjaTemplateRenderer(build_environment(templates_dir))

    text = renderer.render("layout.html", {"title": "<script>", "navigation": [], "clock": ""})

    assert "&lt;script&gt;" in text


def test_fragment_template_renders_valid_json(settings: Settings) -> None:
    renderer = JinjaTemplateRenderer.from_settings(settings)

    payload = json.loads(renderer.render("layout-form-edit.html", {"name": 'Lobby "A"'}))

    assert payload["html"] == '<form>Lobby "A"</form>'
    assert payload["callBack"] == "layoutFormCallback"


def test_unknown_template_raises(templates_dir: Path) -> None:
    renderer = JinjaTemplateRenderer(build_environment(templates_dir))

    with pytest.raises(TemplateNotFound):
        renderer.render("nope.html", {})

    assert renderer.environment.loader is not None
