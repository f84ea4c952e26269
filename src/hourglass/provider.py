"""TimeProvider — the contract every time source implements."""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import UTC, datetime
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from datetime import timedelta


def ensure_utc(value: datetime, what: str = "datetime") -> datetime:
    """Return *value* converted to UTC.  Naive datetimes are rejected."""
    if value.tzinfo is None or value.utcoffset() is None:
        raise ValueError(f"{what} must be timezone-aware, got naive {value!r}")
    return value.astimezone(UTC)


class TimeProvider(ABC):
    """Abstract base for all time sources.

    Application code depends on this interface only.  It never learns
    whether it runs against the real clock or a virtual one, and it has
    no way to move time itself.
    """

    @abstractmethod
    def now(self) -> datetime:
        """Return the current instant as a UTC-aware datetime."""
        ...

    @abstractmethod
    async def wait(self, duration: timedelta) -> None:
        """Suspend the caller for *duration*.  Never returns early."""
        ...

    async def wait_until(self, deadline: datetime) -> None:
        """Suspend until the clock is at or past *deadline*.

        Past or equal deadlines return immediately without side effects.
        Otherwise the remaining duration is computed from ``now()`` and
        handed to ``wait()``.  The two steps are not atomic: another caller
        moving the clock in between can make the wait overshoot or fall
        short of the deadline.

        Raises:
            ValueError: If *deadline* is naive.
        """
        deadline = ensure_utc(deadline, "deadline")
        now = self.now()
        if deadline > now:
            await self.wait(deadline - now)

    @abstractmethod
    def is_test(self) -> bool:
        """Return ``True`` for virtual (test) clocks."""
        ...


SharedTimeProvider = TimeProvider
