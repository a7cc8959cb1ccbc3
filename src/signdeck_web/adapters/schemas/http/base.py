# src/signdeck_web/adapters/schemas/http/base.py
# Copyright (c) Signdeck.
# SPDX-License-Identifier: MIT
"""Shared base for response envelopes.

Purpose:
    Fix the Pydantic configuration and the serialization path used by every
    envelope the base controller emits, so API and AJAX bodies spell keys the
    same way and encode payload data the same way.

Layer: adapters/schemas/http
"""
from __future__ import annotations

from typing import Any

from fastapi.encoders import jsonable_encoder
from pydantic import BaseModel, ConfigDict


class BaseHTTPSchema(BaseModel):
    """Root model for envelopes.

    Unknown fields are rejected, fields may be populated by name or by wire
    alias, and NaN / infinity serialize as ``null``.
    """

    model_config = ConfigDict(
        extra="forbid",
        populate_by_name=True,
        ser_json_inf_nan="null",
        use_enum_values=True,
    )

    def model_dump_http(self, **kwargs: Any) -> dict[str, Any]:
        """Dump to a JSON-ready dict keyed by wire alias.

        ``data`` members are typed ``Any`` and may carry dates, decimals or
        dataclasses supplied by controllers, so the dump goes through FastAPI's
        encoder rather than Pydantic's JSON mode.

        Args:
            **kwargs: Passed to ``model_dump`` (``by_alias`` defaults to True).
        """
        kwargs.setdefault("by_alias", True)
        return jsonable_encoder(self.model_dump(mode="python", **kwargs))
