# src/signdeck_web/types.py
# Copyright (c) Signdeck.
# SPDX-License-Identifier: MIT
"""JSON value aliases.

State ``data`` and decoded field-action rules are handed to JSON
serialization untouched; these aliases describe what they may hold.
"""

from __future__ import annotations

type JsonPrimitive = None | bool | int | float | str
type JsonArray = list[JsonValue]
type JsonObject = dict[str, JsonValue]
type JsonValue = JsonPrimitive | JsonArray | JsonObject

__all__ = ["JsonArray", "JsonObject", "JsonPrimitive", "JsonValue"]
