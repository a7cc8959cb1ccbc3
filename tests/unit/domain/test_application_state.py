# Copyright (c) Signdeck.
# SPDX-License-Identifier: MIT
"""Unit tests for ApplicationState and request classification."""

from __future__ import annotations

import pytest

from signdeck_web.domain.entities.application_state import ApplicationState
from signdeck_web.domain.enums.request_kind import RequestKind
from signdeck_web.domain.exceptions.controller import (
    ControllerNotImplemented,
    FormTemplateError,
    TemplateMissing,
)


def test_defaults() -> None:
    state = ApplicationState()

    assert state.success is True
    assert state.message == ""
    assert state.id is None
    assert state.template == ""
    assert state.data == []
    assert state.records_total is None
    assert state.records_filtered is None
    assert state.buttons == {}
    assert state.field_actions == []
    assert state.is_grid is False


def test_mutable_defaults_are_not_shared() -> None:
    a, b = ApplicationState(), ApplicationState()
    a.buttons["Save"] = "save"

    assert b.buttons == {}


def test_is_grid_only_for_grid_template() -> None:
    assert ApplicationState(template="grid").is_grid is True
    assert ApplicationState(template="grid-view").is_grid is False


def test_hydrate_sets_only_given_fields_and_chains() -> None:
    state = ApplicationState(message="old", id=3)

    returned = state.hydrate(message="Deleted", data=None)

    assert returned is state
    assert state.message == "Deleted"
    assert state.data is None
    assert state.id == 3
    assert state.success is True


def test_hydrate_can_clear_id_and_flag_failure() -> None:
    state = ApplicationState(id=9).hydrate(id=None, success=False)

    assert state.id is None
    assert state.success is False


@pytest.mark.parametrize(
    ("data", "expected"),
    [(None, 0), ([], 0), ([1, 2], 2), ({"a": 1, "b": 2}, 2), ("abc", 1), (7, 1)],
)
def test_item_count(data: object, expected: int) -> None:
    assert ApplicationState(data=data).item_count() == expected


def test_to_payload_uses_wire_names_and_copies_buttons() -> None:
    state = ApplicationState(dialog_title="T", call_back="cb", buttons={"Ok": "ok"})

    payload = state.to_payload()
    payload["buttons"]["Extra"] = "x"

    assert payload["dialogTitle"] == "T"
    assert payload["callBack"] == "cb"
    assert state.buttons == {"Ok": "ok"}
    assert "template" not in payload
    assert "recordsTotal" not in payload


@pytest.mark.parametrize(
    ("surface", "ajax", "expected"),
    [
        ("web", False, RequestKind.WEB_NORMAL),
        ("web", True, RequestKind.WEB_AJAX),
        ("api", False, RequestKind.API),
        ("api", True, RequestKind.API),
        ("player", True, RequestKind.API),
    ],
)
def test_request_kind_classify(surface: str, ajax: bool, expected: RequestKind) -> None:
    assert RequestKind.classify(surface, is_ajax=ajax) is expected


def test_controller_exception_hierarchy_and_codes() -> None:
    missing = TemplateMissing()
    form = FormTemplateError(template="x", details={"line": 1})

    assert isinstance(missing, ControllerNotImplemented)
    assert isinstance(form, ControllerNotImplemented)
    assert missing.code == "TEMPLATE_MISSING"
    assert form.code == "FORM_TEMPLATE_ERROR"
    assert ControllerNotImplemented("boom").code == "CONTROLLER_NOT_IMPLEMENTED"
    assert form.details == {"line": 1, "template": "x"}
    assert str(form) == "Problem with Form Template"
