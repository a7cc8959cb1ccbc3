# src/signdeck_web/infrastructure/clock/system_clock.py
# Copyright (c) Signdeck.
# SPDX-License-Identifier: MIT
"""Page clock.

Formats "now" in the configured timezone for the page header.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import UTC, datetime
from zoneinfo import ZoneInfo

from signdeck_web.config.settings import Settings


class SystemClock:
    """``Clock`` implementation over the system time."""

    __slots__ = ("_fmt", "_zone", "_now")

    def __init__(
        self,
        *,
        fmt: str = "%H:%M",
        timezone: str = "UTC",
        now: Callable[[], datetime] | None = None,
    ) -> None:
        self._fmt = fmt
        self._zone = ZoneInfo(timezone)
        self._now = now or (lambda: datetime.now(tz=UTC))

    @classmethod
    def from_settings(cls, settings: Settings) -> SystemClock:
        """Build a clock using ``CLOCK_FORMAT`` and ``TIMEZONE``."""
        return cls(fmt=settings.clock_format, timezone=settings.timezone)

    def clock(self) -> str:
        """Return the current time formatted for display."""
        return self._now().astimezone(self._zone).strftime(self._fmt)
