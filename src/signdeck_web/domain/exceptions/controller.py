# src/signdeck_web/domain/exceptions/controller.py
# Copyright (c) Signdeck.
# SPDX-License-Identifier: MIT
"""
Controller Exceptions.

Purpose:
    Errors raised when a controller is wired or implemented incorrectly. Both
    are fatal to the current request and are mapped to a 500 error envelope by
    the HTTP error handlers.

Layer: domain/exceptions
"""
from __future__ import annotations

from typing import Any

from .base import DomainError


class ControllerNotImplemented(DomainError):
    """A controller reached render without what the chosen output mode needs."""

    code = "CONTROLLER_NOT_IMPLEMENTED"


class TemplateMissing(ControllerNotImplemented):
    """A full page render was requested but the state names no template."""

    code = "TEMPLATE_MISSING"

    def __init__(self, message: str = "Template Missing", *, details: dict[str, Any] | None = None) -> None:
        super().__init__(message, details=details)


class FormTemplateError(ControllerNotImplemented):
    """A rendered fragment does not satisfy the fragment contract."""

    code = "FORM_TEMPLATE_ERROR"

    def __init__(
        self,
        message: str = "Problem with Form Template",
        *,
        template: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        merged = dict(details or {})
        if template is not None:
            merged.setdefault("template", template)
        super().__init__(message, details=merged)
        self.template = template
