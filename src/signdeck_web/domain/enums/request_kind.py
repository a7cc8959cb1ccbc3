# src/signdeck_web/domain/enums/request_kind.py
# Copyright (c) Signdeck.
# SPDX-License-Identifier: MIT
"""Request classification.

Purpose:
    Classify an incoming request into one of the three output modes a
    controller can render: JSON API, AJAX fragment, or full HTML page.

Layer:
    domain/enums
"""

from __future__ import annotations

from enum import Enum

WEB_SURFACE = "web"


class RequestKind(str, Enum):
    """Output mode selected for a request."""

    API = "api"
    WEB_AJAX = "web_ajax"
    WEB_NORMAL = "web_normal"

    @classmethod
    def classify(cls, surface: str, *, is_ajax: bool) -> RequestKind:
        """Derive the request kind from the application surface and AJAX flag.

        Any surface other than ``"web"`` is the API, whatever the AJAX flag.
        """
        if surface != WEB_SURFACE:
            return cls.API
        return cls.WEB_AJAX if is_ajax else cls.WEB_NORMAL
