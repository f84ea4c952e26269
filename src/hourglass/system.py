"""SystemTimeProvider — the real clock used in production."""

from __future__ import annotations

import asyncio
from datetime import UTC, datetime, timedelta
from typing import Final

from hourglass.provider import TimeProvider


class SystemTimeProvider(TimeProvider):
    """Backed by the system clock.  ``wait`` really sleeps.

    Negative durations are silently ignored, so callers never need to
    special-case a deadline that has already slipped by.
    """

    def now(self) -> datetime:
        return datetime.now(UTC)

    async def wait(self, duration: timedelta) -> None:
        seconds = duration.total_seconds()
        if seconds < 0:
            return
        await asyncio.sleep(seconds)

    def is_test(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "SystemTimeProvider()"


SYSTEM_TIME_PROVIDER: Final[SystemTimeProvider] = SystemTimeProvider()
