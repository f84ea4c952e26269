"""VirtualTimeProvider — a controllable clock for tests.

Waiting on a virtual clock does not block.  Each ``wait`` call moves the
clock forward by its own duration and then yields to the event loop once,
so a loop that "sleeps" for a year finishes in microseconds.

Waits are *additive*: when several tasks share one clock, every wait is
applied to whatever the current instant is when it takes the lock.  The
final instant is ``start + sum(durations)`` regardless of interleaving,
but a single task's post-wait ``now()`` is only guaranteed to be at least
its own start plus its own duration.
"""

from __future__ import annotations

import asyncio
import threading
from datetime import UTC, datetime, timedelta

from hourglass.provider import TimeProvider, ensure_utc

_ZERO = timedelta(0)


class VirtualTimeProvider(TimeProvider):
    """Mutable clock state behind a single lock.

    The lock is a plain ``threading.Lock`` so the clock can be shared
    between tasks of one event loop as well as between threads running
    their own loops.  It is never held across an ``await``.

    Parameters:
        start: Initial instant.  Must be timezone-aware; stored in UTC.
    """

    def __init__(self, start: datetime) -> None:
        self._lock = threading.Lock()
        self._current = ensure_utc(start, "start")
        self._total_waited = _ZERO
        self._wait_call_count = 0

    @classmethod
    def at_now(cls) -> VirtualTimeProvider:
        """Create a virtual clock starting at the current system time."""
        return cls(datetime.now(UTC))

    # ── contract ─────────────────────────────────────────────

    def now(self) -> datetime:
        with self._lock:
            return self._current

    async def wait(self, duration: timedelta) -> None:
        """Add *duration* to the clock and the wait statistics, then yield once.

        Negative durations are accepted: they move the clock backwards and
        lower ``total_waited``.  The call is still counted.
        """
        with self._lock:
            self._record_wait(duration)
        await asyncio.sleep(0)

    async def wait_until(self, deadline: datetime) -> None:
        """Move the clock to *deadline* if it is still in the future.

        Unlike the base implementation, reading the current instant and
        applying the wait happen in one critical section.  Concurrent
        callers waiting for the same deadline therefore land exactly on it,
        and only the first of them is counted as a wait.
        """
        deadline = ensure_utc(deadline, "deadline")
        with self._lock:
            if deadline <= self._current:
                return
            self._record_wait(deadline - self._current)
        await asyncio.sleep(0)

    def is_test(self) -> bool:
        return True

    # ── control ──────────────────────────────────────────────

    def advance(self, duration: timedelta) -> None:
        """Move the clock by *duration* without counting it as a wait.

        A negative duration moves the clock backwards.
        """
        with self._lock:
            self._current += duration

    def set(self, instant: datetime) -> None:
        """Jump to *instant*.  Wait statistics are left alone."""
        instant = ensure_utc(instant, "instant")
        with self._lock:
            self._current = instant

    def total_waited(self) -> timedelta:
        with self._lock:
            return self._total_waited

    def wait_call_count(self) -> int:
        with self._lock:
            return self._wait_call_count

    def reset_wait_tracking(self) -> None:
        """Zero the wait statistics; the current instant is untouched."""
        with self._lock:
            self._total_waited = _ZERO
            self._wait_call_count = 0

    # ── internals ────────────────────────────────────────────

    def _record_wait(self, duration: timedelta) -> None:
        # Caller holds self._lock.
        self._current += duration
        self._total_waited += duration
        self._wait_call_count += 1

    def __repr__(self) -> str:
        return f"VirtualTimeProvider(now={self.now().isoformat()})"
