"""TimeControl — the handle that lets tests move a virtual clock."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from datetime import datetime, timedelta

    from hourglass.virtual import VirtualTimeProvider


class TimeControl:
    """Mutation handle for one virtual clock.

    Only :meth:`SafeTimeProvider.test_control` hands these out, and only for
    virtual clocks.  A handle does not own the clock: any number of them may
    exist at once and they all see the same state.
    """

    __slots__ = ("_provider",)

    def __init__(self, provider: VirtualTimeProvider) -> None:
        self._provider = provider

    def advance(self, duration: timedelta) -> None:
        """Advance time by *duration*."""
        self._provider.advance(duration)

    def set(self, instant: datetime) -> None:
        """Set time to *instant*."""
        self._provider.set(instant)

    def total_waited(self) -> timedelta:
        """Total duration waited since creation or the last reset."""
        return self._provider.total_waited()

    def wait_call_count(self) -> int:
        """Number of ``wait`` calls since creation or the last reset."""
        return self._provider.wait_call_count()

    def reset_wait_tracking(self) -> None:
        """Zero the wait statistics.  The current time is unchanged."""
        self._provider.reset_wait_tracking()

    def __repr__(self) -> str:
        return (
            f"TimeControl(total_waited={self.total_waited()!r}, "
            f"wait_call_count={self.wait_call_count()})"
        )
