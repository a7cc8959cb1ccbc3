# src/signdeck_web/domain/exceptions/base.py
# Copyright (c) Signdeck.
# SPDX-License-Identifier: MIT
"""Exception root for the package.

Every error raised on purpose by ``signdeck_web`` derives from
:class:`DomainError`, so the HTTP layer can map all of them with one handler
keyed on ``code``.
"""
from __future__ import annotations

from typing import Any


class DomainError(Exception):
    """Error with a stable machine code and optional structured details.

    Attributes:
        code: Identifier used in error envelopes and logs.
        message: Text safe to show to a client.
        details: Extra diagnostic fields, empty when there are none.
    """

    code: str = "DOMAIN_ERROR"

    def __init__(self, message: str = "", *, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details: dict[str, Any] = dict(details) if details else {}

    def __str__(self) -> str:
        return self.message
