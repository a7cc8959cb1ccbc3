# src/signdeck_web/adapters/mappers/fragment_parser.py
# Copyright (c) Signdeck.
# SPDX-License-Identifier: MIT
"""Fragment metadata parser.

Purpose:
    Turn the JSON text rendered by an AJAX form template into the dialog
    metadata carried on :class:`ApplicationState` (markup, title, callback,
    buttons and field actions).

Layer:
    adapters/mappers

Notes:
    - The whole fragment is parsed and validated before the state is touched,
      so a contract violation leaves the state exactly as it was.
    - Button lists keep the template-side text format (``label,action`` pairs,
      one list per line) so existing templates render unchanged.
"""

from __future__ import annotations

import json
from typing import Any

from pydantic import ValidationError

from signdeck_web.adapters.schemas.http.fragment import FragmentContract
from signdeck_web.domain.entities.application_state import ApplicationState
from signdeck_web.domain.exceptions.controller import FormTemplateError
from signdeck_web.infrastructure.logging.logger import get_json_logger
from signdeck_web.types import JsonValue

__all__ = ["extract_fragment", "parse_button_spec", "parse_field_actions"]

_LOGGER = get_json_logger(__name__)


def parse_button_spec(spec: str) -> dict[str, str]:
    """Parse a button specification into an ordered label to action mapping.

    Lines are separated by ``"\\n"`` only (a trailing ``"\\r"`` is stripped).
    Each non-blank line holds comma separated tokens consumed two at a time as
    ``(label, action)``. Pairing restarts on every line. A line with an odd
    token count leaves its last label without an action; that label maps to
    ``""``. Later duplicates of a label overwrite the action in place.

    Args:
        spec: Raw button text from the fragment.

    Returns:
        dict[str, str]: Buttons in declaration order.

    Example:
        >>> parse_button_spec("Save,save\\nCancel,cancel")
        {'Save': 'save', 'Cancel': 'cancel'}
    """
    buttons: dict[str, str] = {}
    if not spec.strip():
        return buttons

    for line in spec.split("\n"):
        if not line.strip():
            continue

        tokens = [token.strip() for token in line.strip().split(",")]
        if len(tokens) % 2:
            _LOGGER.warning(
                "fragment_button_line_unpaired",
                extra={"line": line.strip(), "label": tokens[-1]},
            )
            tokens.append("")

        for label, action in zip(tokens[::2], tokens[1::2], strict=True):
            buttons[label] = action

    return buttons


def parse_field_actions(raw: str) -> JsonValue:
    """Decode field-action rules; blank text means no rules.

    Raises:
        json.JSONDecodeError: If ``raw`` is not blank and not valid JSON.
    """
    if not raw.strip():
        return []
    decoded: JsonValue = json.loads(raw)
    return decoded


def _load_contract(rendered: str) -> FragmentContract:
    """Parse rendered text into a validated fragment contract."""
    payload: Any = json.loads(rendered)
    if not isinstance(payload, dict) or not payload:
        raise ValueError("fragment is not a non-empty JSON object")
    return FragmentContract.model_validate(payload)


def extract_fragment(rendered: str, state: ApplicationState, *, template: str) -> None:
    """Copy fragment metadata from rendered template output onto ``state``.

    Args:
        rendered: Text produced by rendering the fragment template.
        state: Application state to update in place.
        template: Template name, used in diagnostics.

    Raises:
        FormTemplateError: If ``rendered`` is not a JSON object with the
            ``html``, ``title``, ``callBack``, ``buttons`` and
            ``fieldActions`` string members, or if ``fieldActions`` is not
            valid JSON.
    """
    try:
        contract = _load_contract(rendered)
        field_actions = parse_field_actions(contract.field_actions)
    except (ValueError, ValidationError) as exc:
        # json.JSONDecodeError is a ValueError subclass.
        _LOGGER.error(
            "Problem with Template: View = %s",
            template,
            extra={"template": template, "reason": str(exc)},
        )
        raise FormTemplateError(template=template) from exc

    buttons = parse_button_spec(contract.buttons)

    state.html = contract.html
    state.dialog_title = contract.title.strip()
    state.call_back = contract.call_back
    state.buttons = buttons
    state.field_actions = field_actions
