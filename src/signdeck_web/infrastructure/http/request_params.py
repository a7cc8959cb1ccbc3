# src/signdeck_web/infrastructure/http/request_params.py
# Copyright (c) Signdeck.
# SPDX-License-Identifier: MIT
"""Request parameter access for controllers.

Summary:
    Grid widgets send nested parameters in bracket notation
    (``columns[0][data]=id&order[0][dir]=desc&search[value]=abc``). This module
    decodes such flat key/value pairs into nested mappings and lists and wraps
    a Starlette request behind the ``RequestAccessor`` protocol.

Contract:
    • ``get(name)`` sees query parameters overlaid with form fields.
    • Index-keyed groups (``0..n-1``) decode to lists; others stay mappings.
    • ``get_int`` never raises: absent or non-integer values give the default.
    • ``is_ajax`` reads ``X-Requested-With: XMLHttpRequest``.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping
from typing import Any, Final

from starlette.requests import Request

__all__ = ["StarletteRequestAccessor", "parse_bracket_params"]

_AJAX_HEADER: Final[str] = "X-Requested-With"
_AJAX_VALUE: Final[str] = "xmlhttprequest"
_KEY_RE: Final[re.Pattern[str]] = re.compile(r"^([^\[\]]+)((?:\[[^\[\]]*\])+)$")
_SEGMENT_RE: Final[re.Pattern[str]] = re.compile(r"\[([^\[\]]*)\]")
_FORM_TYPES: Final[tuple[str, ...]] = (
    "application/x-www-form-urlencoded",
    "multipart/form-data",
)


def _split_key(key: str) -> list[str]:
    """Split ``a[b][c]`` into ``["a", "b", "c"]``; plain keys stay whole."""
    match = _KEY_RE.match(key)
    if match is None:
        return [key]
    return [match.group(1), *_SEGMENT_RE.findall(match.group(2))]


def _listify(node: Any) -> Any:
    """Turn mappings keyed ``"0".."n-1"`` into lists, recursively."""
    if not isinstance(node, dict):
        return node
    converted = {key: _listify(value) for key, value in node.items()}
    if converted and all(key.isdigit() for key in converted):
        indices = sorted(int(key) for key in converted)
        if indices == list(range(len(indices))):
            return [converted[str(i)] for i in indices]
    return converted


def parse_bracket_params(pairs: Iterable[tuple[str, str]]) -> dict[str, Any]:
    """Decode bracket-notation key/value pairs into nested structures.

    Args:
        pairs: Flat ``(key, value)`` pairs in request order.

    Returns:
        dict[str, Any]: Top-level parameters. The last value wins on repeated
        scalar keys; ``name[]`` appends.

    Example:
        >>> parse_bracket_params([("columns[0][data]", "id"), ("order[0][dir]", "desc")])
        {'columns': [{'data': 'id'}], 'order': [{'dir': 'desc'}]}
    """
    root: dict[str, Any] = {}
    for key, value in pairs:
        parts = _split_key(key)
        node = root
        for depth, part in enumerate(parts):
            if part == "":
                part = str(len(node))
            if depth == len(parts) - 1:
                node[part] = value
                break
            child = node.get(part)
            if not isinstance(child, dict):
                child = {}
                node[part] = child
            node = child
    return {key: _listify(value) for key, value in root.items()}


class StarletteRequestAccessor:
    """``RequestAccessor`` backed by a Starlette request.

    Build with :meth:`from_request` so form bodies are read once up front.
    """

    __slots__ = ("_request", "_params")

    def __init__(self, request: Request, params: Mapping[str, Any]) -> None:
        self._request = request
        self._params = dict(params)

    @classmethod
    async def from_request(cls, request: Request) -> StarletteRequestAccessor:
        """Read query and (when present) form parameters from ``request``."""
        pairs: list[tuple[str, str]] = list(request.query_params.multi_items())

        content_type = request.headers.get("content-type", "")
        if request.method not in ("GET", "HEAD") and content_type.startswith(_FORM_TYPES):
            form = await request.form()
            pairs.extend((key, value) for key, value in form.multi_items() if isinstance(value, str))

        return cls(request, parse_bracket_params(pairs))

    def get(self, name: str, default: Any = None) -> Any:
        """Return a decoded parameter or ``default``."""
        return self._params.get(name, default)

    def get_int(self, name: str, default: int | None = None) -> int | None:
        """Return a parameter as int, or ``default`` when absent or invalid."""
        value = self._params.get(name)
        if isinstance(value, bool):
            return default
        if isinstance(value, int):
            return value
        if isinstance(value, str):
            try:
                return int(value.strip())
            except ValueError:
                return default
        return default

    def is_ajax(self) -> bool:
        """Return True for script-issued requests."""
        return self._request.headers.get(_AJAX_HEADER, "").lower() == _AJAX_VALUE
