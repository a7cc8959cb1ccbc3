# Copyright (c) Signdeck.
# SPDX-License-Identifier: MIT
"""Base Controller.

Summary:
    Canonical base for page and API controllers. Subclasses run their
    business logic, fill in the request's :class:`ApplicationState`, and
    finish with :meth:`BaseController.render`, which picks the output mode:

    * API surface        -> JSON envelope with the caller's status code.
    * Web, AJAX request  -> JSON body (grid envelope or full state), always 200.
    * Web, normal request -> full HTML page from the state's template.

    Every collaborator arrives through a :class:`ControllerContext`; there is
    no process-wide application registry.

Layer:
    adapters/controllers
"""
from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from starlette.responses import JSONResponse, Response

from signdeck_web.adapters.mappers.fragment_parser import extract_fragment
from signdeck_web.adapters.presenters.base_presenter import BasePresenter
from signdeck_web.adapters.schemas.http.envelopes import GridEnvelope
from signdeck_web.domain.entities.application_state import ApplicationState
from signdeck_web.domain.enums.request_kind import WEB_SURFACE, RequestKind
from signdeck_web.domain.exceptions.controller import TemplateMissing
from signdeck_web.domain.interfaces.collaborators import (
    ApiResponder,
    Clock,
    NavigationProvider,
    RequestAccessor,
    TemplateRenderer,
    UrlResolver,
    UserProvider,
)
from signdeck_web.infrastructure.logging.logger import get_json_logger

_LOGGER = get_json_logger(__name__)


@dataclass(slots=True)
class ControllerContext:
    """Everything a controller needs to handle one request.

    Attributes:
        request: Parameter access and AJAX flag.
        renderer: Template engine facade.
        api: Responder used on the API surface.
        users: Current user source.
        navigation: Navigation menu source.
        clock: Page clock source.
        surface: Named application surface (``"web"`` or an API name).
        state: Result state for this request.
        template_extension: Suffix appended to ``state.template``.
        grid_default_length: Page length when the request omits ``length``.
        flash: Flash messages carried over from the previous request.
        url_resolver: Named route resolver, if routing is available.
    """

    request: RequestAccessor
    renderer: TemplateRenderer
    api: ApiResponder
    users: UserProvider
    navigation: NavigationProvider
    clock: Clock
    surface: str = WEB_SURFACE
    state: ApplicationState = field(default_factory=ApplicationState)
    template_extension: str = ".html"
    grid_default_length: int = 10
    flash: Mapping[str, str] = field(default_factory=dict)
    url_resolver: UrlResolver | None = None


class BaseController:
    """Base for all controllers.

    Controllers manipulate :meth:`get_state` to represent the data which will
    be output to the view layer, then call :meth:`render` once.
    """

    __slots__ = ("_ctx", "_presenter", "_full_page", "_rendered", "_no_output", "response")

    def __init__(self, context: ControllerContext, *, presenter: BasePresenter | None = None) -> None:
        self._ctx = context
        self._presenter = presenter or BasePresenter()
        self._full_page = True
        self._rendered = False
        self._no_output = False
        self.response: Response | None = None

    # ------------------------- Accessors ------------------------------- #

    def get_state(self) -> ApplicationState:
        """Return the application state for this request."""
        return self._ctx.state

    def get_user(self) -> Any:
        """Return the current user."""
        return self._ctx.users.current_user()

    def is_api(self) -> bool:
        """Return True when serving any surface other than the web one."""
        return self._ctx.surface != WEB_SURFACE

    def request_kind(self) -> RequestKind:
        """Classify the current request into an output mode."""
        return RequestKind.classify(self._ctx.surface, is_ajax=self._ctx.request.is_ajax())

    def url_for(self, route: str, **params: Any) -> str:
        """Return the URL of a named route.

        Raises:
            RuntimeError: If the context carries no URL resolver.
        """
        if self._ctx.url_resolver is None:
            raise RuntimeError("No URL resolver configured for this controller")
        return self._ctx.url_resolver(route, **params)

    def get_flash(self, key: str) -> str:
        """Return the flash message stored under ``key`` or an empty string."""
        return self._ctx.flash.get(key, "")

    @property
    def full_page(self) -> bool:
        """Whether a non-AJAX web request should get a full page automatically."""
        return self._full_page

    @property
    def rendered(self) -> bool:
        """Whether :meth:`render` has already produced output."""
        return self._rendered

    def set_not_automatic_full_page(self) -> None:
        """Do not output a full page automatically."""
        self._full_page = False

    def set_no_output(self, flag: bool = True) -> None:
        """Suppress (or re-enable) rendering for this controller."""
        self._no_output = flag

    # ------------------------- Rendering ------------------------------- #

    def render(self, status: int = 200) -> Response | None:
        """End the controller execution and produce the response.

        Only the first call renders; later calls, and calls after
        ``set_no_output(True)``, return ``None`` without touching the state.

        Args:
            status: Status code for API and full-page responses. AJAX
                responses always use 200.

        Returns:
            The response, or ``None`` when nothing was rendered.

        Raises:
            TemplateMissing: A full page was requested without a template.
            FormTemplateError: An AJAX fragment template rendered output that
                does not satisfy the fragment contract.
        """
        if self._rendered or self._no_output:
            return None

        state = self._ctx.state
        draw = self._ctx.request.get_int("draw", 0) or 0

        # Grid requests can come from any surface, so they are shaped first.
        grid = self._presenter.present_grid(state, draw=draw) if state.is_grid else None

        kind = self.request_kind()
        if kind is RequestKind.API:
            response = self._render_api(state, grid, status)
        elif kind is RequestKind.WEB_AJAX:
            response = self._render_ajax(state, grid)
        else:
            response = self._render_page(state, grid, status)

        self._rendered = True
        self.response = response
        _LOGGER.debug(
            "controller_rendered",
            extra={
                "controller": type(self).__name__,
                "kind": kind.value,
                "template": state.template,
                "success": state.success,
                "status_code": response.status_code,
            },
        )
        return response

    def _render_api(
        self, state: ApplicationState, grid: GridEnvelope | None, status: int
    ) -> Response:
        result = self._presenter.present_api(state, grid=grid)
        return self._ctx.api.respond(result.body.model_dump_http(), status)

    def _render_ajax(self, state: ApplicationState, grid: GridEnvelope | None) -> Response:
        if state.template and not state.is_grid:
            self.render_fragment()

        result = self._presenter.present_ajax(state, grid=grid)
        response = JSONResponse(result.body)
        self._presenter.apply_headers(result, response)
        return response

    def _render_page(
        self, state: ApplicationState, grid: GridEnvelope | None, status: int
    ) -> Response:
        if not state.template:
            raise TemplateMissing()

        context = _view_context(grid.model_dump_http() if grid is not None else state.data)
        context["navigation"] = self._ctx.navigation.menu()
        context["clock"] = self._ctx.clock.clock()
        context["currentUser"] = self.get_user()

        return self._ctx.renderer.render_page(
            state.template + self._ctx.template_extension, context, status
        )

    def render_fragment(self) -> None:
        """Render the state's template as a fragment and pull out its metadata.

        Raises:
            FormTemplateError: If the rendered text breaks the fragment contract.
        """
        state = self._ctx.state
        context = _view_context(state.data)
        context["currentUser"] = self.get_user()

        rendered = self._ctx.renderer.render(state.template + self._ctx.template_extension, context)
        extract_fragment(rendered, state, template=state.template)

    # ------------------------- Grid helpers ---------------------------- #

    def grid_filter(self, extra: Mapping[str, Any] | None = None) -> dict[str, Any]:
        """Build a grid filter from the paging and search request parameters.

        Standard keys (``start``, ``length``, ``search``) override entries of
        the same name in ``extra``.
        """
        request = self._ctx.request
        standard: dict[str, Any] = {
            "start": request.get_int("start", 0),
            "length": request.get_int("length", self._ctx.grid_default_length),
        }

        search = request.get("search")
        if isinstance(search, Mapping):
            if "value" in search:
                standard["search"] = search["value"]
        elif isinstance(search, str | int | float) and search != "":
            standard["search"] = search

        return {**(extra or {}), **standard}

    def grid_sort(self) -> list[str] | None:
        """Map grid order requests onto sortable column expressions.

        Returns:
            ``["`name` DESC", "`other`"]`` style tokens, or ``None`` when the
            request carries no column definitions.
        """
        request = self._ctx.request
        columns = request.get("columns")
        if not columns or not isinstance(columns, list | Mapping):
            return None

        order = request.get("order", [])
        if isinstance(order, Mapping):
            order = list(order.values())
        if not isinstance(order, list):
            return []

        tokens: list[str] = []
        for element in order:
            if not isinstance(element, Mapping):
                continue
            column = _column_at(columns, element.get("column"))
            if column is None:
                _LOGGER.debug("grid_sort_unknown_column", extra={"column": element.get("column")})
                continue

            name = column.get("name") or ""
            key = name if name != "" else column.get("data", "")
            token = f"`{key}`"
            if element.get("dir") == "desc":
                token += " DESC"
            tokens.append(token)

        return tokens


def _view_context(data: Any) -> dict[str, Any]:
    """Return a mutable template context built from state data."""
    if data is None:
        return {}
    if isinstance(data, Mapping):
        return dict(data)
    return {"data": data}


def _column_at(columns: list[Any] | Mapping[str, Any], raw: Any) -> Mapping[str, Any] | None:
    """Look up a column definition by its positional index."""
    try:
        index = int(raw)
    except (TypeError, ValueError):
        return None

    if isinstance(columns, list):
        column = columns[index] if 0 <= index < len(columns) else None
    else:
        column = columns.get(str(index))
    return column if isinstance(column, Mapping) else None
