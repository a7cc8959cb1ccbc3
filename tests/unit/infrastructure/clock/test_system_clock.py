# Copyright (c) Signdeck.
# SPDX-License-Identifier: MIT
"""Unit tests for the page clock."""

from __future__ import annotations

from datetime import UTC, datetime

from signdeck_web.config.settings import Settings
from signdeck_web.infrastructure.clock.system_clock import SystemClock

_NOON_UTC = datetime(2024, 7, 1, 12, 5, tzinfo=UTC)


def test_clock_formats_in_configured_zone() -> None:
    clock = SystemClock(fmt="%H:%M", timezone="Europe/London", now=lambda: _NOON_UTC)

    assert clock.clock() == "13:05"


def test_clock_custom_format() -> None:
    clock = SystemClock(fmt="%Y-%m-%d %H:%M:%S", now=lambda: _NOON_UTC)

    assert clock.clock() == "2024-07-01 12:05:00"


def test_clock_from_settings(settings: Settings) -> None:
    clock = SystemClock.from_settings(settings.model_copy(update={"clock_format": "%H"}))

    assert len(clock.clock()) == 2
