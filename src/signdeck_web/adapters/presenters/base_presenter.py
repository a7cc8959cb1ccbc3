# Copyright (c) Signdeck.
# SPDX-License-Identifier: MIT
"""Presenter utilities for application state output.

Purpose:
    Thin helpers used by controllers to shape an :class:`ApplicationState`
    into the payload each output mode emits.

Responsibilities:
    * Build the grid envelope, applying record-count defaults.
    * Build API success / error envelopes.
    * Build the AJAX body (grid envelope or full state) with its headers.

Layer:
    adapters/presenters
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from fastapi.encoders import jsonable_encoder
from starlette.responses import Response

from signdeck_web.adapters.schemas.http.envelopes import (
    ApiErrorEnvelope,
    ApiSuccessEnvelope,
    GridEnvelope,
)
from signdeck_web.domain.entities.application_state import ApplicationState
from signdeck_web.infrastructure.logging.logger import get_json_logger

_LOGGER = get_json_logger(__name__)

JSON_CONTENT_TYPE = "application/json"


@dataclass(slots=True)
class PresentResult[T]:
    """Presentation result envelope.

    Attributes:
        body: Envelope instance or plain mapping.
        headers: Extra HTTP headers to apply.
        status_code: Optional HTTP status override.
    """

    body: T
    headers: Mapping[str, str] = field(default_factory=dict)
    status_code: int | None = None


class BasePresenter:
    """Shapes application state into output-mode specific payloads.

    Business decisions (what the state contains) stay with the controllers;
    this class only decides envelope shape.
    """

    # ------------------------- Grid ------------------------------------ #

    def present_grid(self, state: ApplicationState, *, draw: int) -> GridEnvelope:
        """Build the grid envelope for ``state``.

        ``records_total`` falls back to the number of items in ``data`` and
        ``records_filtered`` to the total, but only when they are unset
        (``None``); an explicit zero is kept.
        """
        records_total = (
            state.item_count() if state.records_total is None else state.records_total
        )
        records_filtered = (
            records_total if state.records_filtered is None else state.records_filtered
        )
        return GridEnvelope(
            draw=draw,
            records_total=records_total,
            records_filtered=records_filtered,
            data=state.data,
        )

    # ------------------------- API ------------------------------------- #

    def present_api(
        self,
        state: ApplicationState,
        *,
        grid: GridEnvelope | None = None,
    ) -> PresentResult[ApiSuccessEnvelope | ApiErrorEnvelope | GridEnvelope]:
        """Build the API payload.

        Behavior:
            * Failure always yields ``{"error": true, "message": ...}``.
            * Successful grids yield the grid envelope unchanged.
            * Other successes yield ``{"message", "id", "data"}``.
        """
        if not state.success:
            return PresentResult(body=ApiErrorEnvelope(message=state.message))
        if grid is not None:
            return PresentResult(body=grid)
        return PresentResult(
            body=ApiSuccessEnvelope(message=state.message, id=state.id, data=state.data)
        )

    # ------------------------- AJAX ------------------------------------ #

    def present_ajax(
        self,
        state: ApplicationState,
        *,
        grid: GridEnvelope | None = None,
    ) -> PresentResult[dict[str, Any]]:
        """Build the AJAX body: the grid envelope, or the whole state.

        The status is pinned to 200; client scripts read ``success`` from the
        body instead of the transport status.
        """
        body = grid.model_dump_http() if grid is not None else _encode(state.to_payload())
        return PresentResult(
            body=body,
            headers={"Content-Type": JSON_CONTENT_TYPE},
            status_code=200,
        )

    # ------------------------- Header application ---------------------- #

    @staticmethod
    def apply_headers(result: PresentResult[Any], response: Response) -> None:
        """Apply headers and optional status code to the outgoing response."""
        for name, value in result.headers.items():
            response.headers[name] = value

        if result.status_code is not None:
            response.status_code = result.status_code
        _LOGGER.debug(
            "presenter_headers_applied",
            extra={"headers": dict(result.headers), "status_code": response.status_code},
        )


def _encode(payload: Mapping[str, Any]) -> dict[str, Any]:
    """Return a JSON-serializable copy of ``payload``."""
    encoded: dict[str, Any] = jsonable_encoder(dict(payload))
    return encoded
