# src/signdeck_web/domain/entities/application_state.py
# Copyright (c) Signdeck.
# SPDX-License-Identifier: MIT
"""Application State (Domain Layer).

Purpose:
    Mutable per-request result bag. Controllers populate it while handling a
    request; the base controller consumes it exactly once when rendering.

Layer:
    domain/entities

Notes:
    - ``data`` and ``field_actions`` are JSON-like values (see
      :mod:`signdeck_web.types`) and are handed to JSON serialization as-is.
    - ``html``, ``dialog_title``, ``call_back``, ``buttons`` and
      ``field_actions`` are only populated by fragment extraction.
"""

from __future__ import annotations

from collections.abc import Sized
from dataclasses import dataclass, field
from typing import Any

from signdeck_web.types import JsonValue

GRID_TEMPLATE = "grid"

_UNSET: Any = object()


@dataclass(slots=True)
class ApplicationState:
    """Result state shared between a controller and the response shaper.

    Attributes:
        success: False switches every output mode to its error shape.
        message: Human-readable outcome message.
        id: Identifier of the entity the request acted upon, if any.
        template: Template name, ``"grid"`` for tabular results, or empty.
        data: Payload handed to the view layer.
        records_total: Grid total count; defaults to ``len(data)`` when None.
        records_filtered: Grid filtered count; defaults to the total when None.
        html: Rendered fragment markup.
        dialog_title: Title extracted from a fragment.
        call_back: Client-side callback extracted from a fragment.
        buttons: Ordered button label to action mapping.
        field_actions: Decoded field-action rules.
    """

    success: bool = True
    message: str = ""
    id: Any = None
    template: str = ""
    data: JsonValue | Any = field(default_factory=list)
    records_total: int | None = None
    records_filtered: int | None = None
    html: str = ""
    dialog_title: str = ""
    call_back: str = ""
    buttons: dict[str, str] = field(default_factory=dict)
    field_actions: JsonValue = field(default_factory=list)

    @property
    def is_grid(self) -> bool:
        """Return True when the state carries a grid result."""
        return self.template == GRID_TEMPLATE

    def hydrate(
        self,
        *,
        message: str = _UNSET,
        id: Any = _UNSET,
        data: Any = _UNSET,
        success: bool = _UNSET,
    ) -> ApplicationState:
        """Set several result fields at once, leaving omitted ones untouched."""
        if message is not _UNSET:
            self.message = message
        if id is not _UNSET:
            self.id = id
        if data is not _UNSET:
            self.data = data
        if success is not _UNSET:
            self.success = success
        return self

    def item_count(self) -> int:
        """Count the items in ``data`` (None counts as zero, scalars as one)."""
        if self.data is None:
            return 0
        if isinstance(self.data, Sized) and not isinstance(self.data, str | bytes):
            return len(self.data)
        return 1

    def to_payload(self) -> dict[str, Any]:
        """Return the full state as the AJAX response body mapping."""
        return {
            "success": self.success,
            "message": self.message,
            "id": self.id,
            "data": self.data,
            "html": self.html,
            "dialogTitle": self.dialog_title,
            "callBack": self.call_back,
            "buttons": dict(self.buttons),
            "fieldActions": self.field_actions,
        }
