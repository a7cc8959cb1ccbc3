# src/signdeck_web/adapters/schemas/http/fragment.py
# Copyright (c) Signdeck.
# SPDX-License-Identifier: MIT
"""Fragment contract.

Purpose:
    Shape every AJAX form template must render: a JSON object carrying the
    markup plus dialog metadata. Buttons and field actions are themselves
    encoded as text (one ``label,action`` list per line, and a JSON document
    respectively) so template authors can write them inline.

Example:
    {"html": "<form>...</form>", "title": "Edit Layout", "callBack": "",
     "buttons": "Cancel,closeDialog()\\nSave,$('#f').submit()",
     "fieldActions": ""}
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

__all__ = ["FragmentContract"]


class FragmentContract(BaseModel):
    """Validated rendered fragment."""

    model_config = ConfigDict(title="FragmentContract", extra="ignore", strict=True)

    html: str = Field(..., description="Rendered markup.")
    title: str = Field(..., description="Dialog title; surrounding whitespace is dropped.")
    call_back: str = Field(..., alias="callBack", description="Client callback name.")
    buttons: str = Field(..., description="Newline separated 'label,action[,label,action]' lists.")
    field_actions: str = Field(..., alias="fieldActions", description="JSON encoded field rules.")
