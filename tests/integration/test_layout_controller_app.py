# Copyright (c) Signdeck.
# SPDX-License-Identifier: MIT
"""End-to-end tests: a controller mounted on the application factory."""

from __future__ import annotations

from typing import Any

import pytest
from fastapi import APIRouter, Depends
from fastapi.testclient import TestClient
from starlette.responses import Response

from signdeck_web.adapters.controllers.base import BaseController, ControllerContext
from signdeck_web.config.settings import Settings
from signdeck_web.dependencies.controller import get_controller_context
from signdeck_web.main import create_app

_LAYOUTS = [
    {"layoutId": 1, "layout": "Lobby"},
    {"layoutId": 2, "layout": "Foyer"},
    {"layoutId": 3, "layout": "Canteen"},
]


class LayoutController(BaseController):
    """Small controller exercising each output mode."""

    def display_page(self) -> Response | None:
        self.get_state().template = "layout"
        self.get_state().data = {"title": "Layouts"}
        return self.render()

    def grid(self) -> Response | None:
        flt = self.grid_filter({"retired": 0})
        rows = _LAYOUTS[flt["start"] : flt["start"] + flt["length"]]
        state = self.get_state()
        state.template = "grid"
        state.data = {"rows": rows, "sort": self.grid_sort()}
        state.records_total = len(_LAYOUTS)
        return self.render()

    def edit_form(self, layout_id: int) -> Response | None:
        layout = next((row for row in _LAYOUTS if row["layoutId"] == layout_id), None)
        state = self.get_state()
        if layout is None:
            state.hydrate(success=False, message="Layout not found")
            return self.render(404)
        state.template = "layout-form-edit"
        state.hydrate(id=layout_id, data={"name": layout["layout"]})
        return self.render()

    def broken(self) -> Response | None:
        self.get_state().template = "broken-form"
        return self.render()

    def no_template(self) -> Response | None:
        return self.render()


def _build(settings: Settings) -> TestClient:
    router = APIRouter()

    @router.get("/layout/view")
    async def view(ctx: ControllerContext = Depends(get_controller_context)) -> Any:
        return LayoutController(ctx).display_page()

    @router.api_route("/layout/grid", methods=["GET", "POST"])
    async def grid(ctx: ControllerContext = Depends(get_controller_context)) -> Any:
        return LayoutController(ctx).grid()

    @router.get("/layout/form/edit/{layout_id}")
    async def edit(layout_id: int, ctx: ControllerContext = Depends(get_controller_context)) -> Any:
        return LayoutController(ctx).edit_form(layout_id)

    @router.get("/layout/broken")
    async def broken(ctx: ControllerContext = Depends(get_controller_context)) -> Any:
        return LayoutController(ctx).broken()

    @router.get("/layout/bare")
    async def bare(ctx: ControllerContext = Depends(get_controller_context)) -> Any:
        return LayoutController(ctx).no_template()

    app = create_app(settings, navigation=[{"title": "Layouts", "link": "/layout/view"}])
    app.include_router(router)
    return TestClient(app)


@pytest.fixture
def web(settings: Settings) -> TestClient:
    return _build(settings)


@pytest.fixture
def api(settings: Settings) -> TestClient:
    return _build(settings.model_copy(update={"app_surface": "api"}))


_AJAX = {"X-Requested-With": "XMLHttpRequest"}


def test_full_page_includes_navigation_and_clock(web: TestClient) -> None:
    r = web.get("/layout/view")

    assert r.status_code == 200
    assert r.headers["content-type"].startswith("text/html")
    assert "<h1>Layouts</h1>" in r.text
    assert "<nav>Layouts</nav>" in r.text
    assert 'class="clock"' in r.text
    assert r.headers["X-Request-ID"]


def test_ajax_form_returns_fragment_metadata(web: TestClient) -> None:
    r = web.get("/layout/form/edit/2", headers=_AJAX)

    assert r.status_code == 200
    body = r.json()
    assert body["success"] is True
    assert body["id"] == 2
    assert body["html"] == "<form>Foyer</form>"
    assert body["dialogTitle"] == "Edit Foyer"
    assert body["callBack"] == "layoutFormCallback"
    assert list(body["buttons"].items()) == [("Cancel", "closeDialog()"), ("Save", "submitForm()")]
    assert body["fieldActions"] == [{"field": "name", "trigger": "change"}]


def test_ajax_failure_still_returns_200(web: TestClient) -> None:
    r = web.get("/layout/form/edit/99", headers=_AJAX)

    assert r.status_code == 200
    assert r.json()["success"] is False
    assert r.json()["message"] == "Layout not found"


def test_ajax_grid_posts_bracket_params(web: TestClient) -> None:
    r = web.post(
        "/layout/grid",
        headers=_AJAX,
        data={
            "draw": "7",
            "start": "1",
            "length": "1",
            "columns[0][data]": "layoutId",
            "columns[0][name]": "",
            "columns[1][data]": "layout",
            "columns[1][name]": "layout",
            "order[0][column]": "1",
            "order[0][dir]": "desc",
        },
    )

    assert r.status_code == 200
    body = r.json()
    assert body["draw"] == 7
    assert body["recordsTotal"] == 3
    assert body["recordsFiltered"] == 3
    assert body["data"] == {"rows": [_LAYOUTS[1]], "sort": ["`layout` DESC"]}


def test_api_surface_success_and_error_envelopes(api: TestClient) -> None:
    ok = api.get("/layout/form/edit/1", headers=_AJAX)
    assert ok.status_code == 200
    assert ok.json() == {"message": "", "id": 1, "data": {"name": "Lobby"}}

    missing = api.get("/layout/form/edit/42")
    assert missing.status_code == 404
    assert missing.json() == {"error": True, "message": "Layout not found"}


def test_api_surface_grid(api: TestClient) -> None:
    r = api.get("/layout/grid", params={"draw": "2"})

    assert r.status_code == 200
    assert r.json()["draw"] == 2
    assert r.json()["recordsTotal"] == 3
    assert r.json()["data"]["sort"] is None


def test_missing_template_maps_to_error_envelope(web: TestClient) -> None:
    r = web.get("/layout/bare")

    assert r.status_code == 500
    err = r.json()["error"]
    assert err["code"] == "TEMPLATE_MISSING"
    assert err["trace_id"] == r.headers["X-Request-ID"]


def test_broken_fragment_maps_to_error_envelope(web: TestClient) -> None:
    r = web.get("/layout/broken", headers=_AJAX)

    assert r.status_code == 500
    assert r.json()["error"]["code"] == "FORM_TEMPLATE_ERROR"
    assert r.json()["error"]["details"] == {"template": "broken-form"}
