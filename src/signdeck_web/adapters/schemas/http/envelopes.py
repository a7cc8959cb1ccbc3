# src/signdeck_web/adapters/schemas/http/envelopes.py
# Copyright (c) Signdeck.
# SPDX-License-Identifier: MIT
"""HTTP Envelopes (Adapters Layer).

Purpose:
    Transport-facing envelopes emitted by the base controller:
      - ApiSuccessEnvelope: {"message", "id", "data"}
      - ApiErrorEnvelope:   {"error": true, "message"}
      - GridEnvelope:       {"draw", "recordsTotal", "recordsFiltered", "data"}

    The grid envelope follows the DataTables server-side processing contract,
    hence the camelCase wire names.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import ConfigDict, Field

from signdeck_web.adapters.schemas.http.base import BaseHTTPSchema

__all__ = [
    "ApiErrorEnvelope",
    "ApiSuccessEnvelope",
    "GridEnvelope",
]


# ---------------------------------------------------------------------------
# API envelopes
# ---------------------------------------------------------------------------


class ApiSuccessEnvelope(BaseHTTPSchema):
    """Successful non-grid API response."""

    model_config = ConfigDict(
        title="ApiSuccessEnvelope",
        extra="forbid",
        json_schema_extra={
            "examples": [{"message": "Added Layout", "id": 12, "data": {"layoutId": 12}}]
        },
    )

    message: str = Field(default="", description="Human-readable outcome message.")
    id: Any = Field(default=None, description="Identifier of the affected entity, any type.")
    data: Any = Field(default=None, description="Returned resource or value.")


class ApiErrorEnvelope(BaseHTTPSchema):
    """Failed API response; grid metadata is never included."""

    model_config = ConfigDict(
        title="ApiErrorEnvelope",
        extra="forbid",
        json_schema_extra={"examples": [{"error": True, "message": "Layout not found"}]},
    )

    error: Literal[True] = Field(default=True, description="Always true.")
    message: str = Field(default="", description="Human-readable error description.")


# ---------------------------------------------------------------------------
# Grid envelope
# ---------------------------------------------------------------------------


class GridEnvelope(BaseHTTPSchema):
    """Server-side processing grid response."""

    model_config = ConfigDict(
        title="GridEnvelope",
        extra="forbid",
        populate_by_name=True,
    )

    draw: int = Field(..., description="Client draw counter echoed back.")
    records_total: int = Field(..., alias="recordsTotal")
    records_filtered: int = Field(..., alias="recordsFiltered")
    data: Any = Field(default_factory=list, description="Rows for the current page.")
