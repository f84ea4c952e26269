"""SafeTimeProvider — the gated provider application code holds."""

from __future__ import annotations

from typing import TYPE_CHECKING

from hourglass.config import (
    RealClock,
    TimeSource,
    new_virtual_provider,
    time_source_from_env,
)
from hourglass.control import TimeControl
from hourglass.system import SYSTEM_TIME_PROVIDER

if TYPE_CHECKING:
    from collections.abc import Mapping
    from datetime import datetime, timedelta

    from hourglass.provider import TimeProvider
    from hourglass.virtual import VirtualTimeProvider


class SafeTimeProvider:
    """Production-safe wrapper that keeps time control out of reach.

    The wrapper holds the provider through the :class:`TimeProvider`
    contract.  For virtual clocks it additionally keeps a typed reference to
    the same :class:`VirtualTimeProvider`, and that reference is the only
    way to obtain a :class:`TimeControl`.  A wrapper built for the system
    clock has no such reference, so nothing reachable from it can move time.

    Copies share the underlying clock: advancing time through one copy's
    control handle is visible through every other copy.

    Parameters:
        source: Which clock to use.  Defaults to :class:`RealClock`.
    """

    __slots__ = ("_inner", "_virtual")

    def __init__(self, source: TimeSource | None = None) -> None:
        if source is None:
            source = RealClock()
        self._virtual: VirtualTimeProvider | None
        if isinstance(source, RealClock):
            self._inner: TimeProvider = SYSTEM_TIME_PROVIDER
            self._virtual = None
        else:
            self._virtual = new_virtual_provider(source)
            self._inner = self._virtual

    @classmethod
    def from_virtual_provider(cls, provider: VirtualTimeProvider) -> SafeTimeProvider:
        """Wrap an existing virtual clock, sharing its state."""
        safe = cls.__new__(cls)
        safe._inner = provider
        safe._virtual = provider
        return safe

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> SafeTimeProvider:
        """Build from ``TIME_SOURCE`` / ``TIME_START``."""
        return cls(time_source_from_env(environ))

    # ── contract ─────────────────────────────────────────────

    def now(self) -> datetime:
        return self._inner.now()

    async def wait(self, duration: timedelta) -> None:
        await self._inner.wait(duration)

    async def wait_until(self, deadline: datetime) -> None:
        await self._inner.wait_until(deadline)

    def is_test_mode(self) -> bool:
        return self._inner.is_test()

    # ── control ──────────────────────────────────────────────

    def test_control(self) -> TimeControl | None:
        """Return a control handle, or ``None`` for the system clock."""
        if self._virtual is None:
            return None
        return TimeControl(self._virtual)

    # ── copying ──────────────────────────────────────────────

    def clone(self) -> SafeTimeProvider:
        """Return a new wrapper over the same clock."""
        twin = type(self).__new__(type(self))
        twin._inner = self._inner
        twin._virtual = self._virtual
        return twin

    __copy__ = clone

    def __deepcopy__(self, memo: dict[int, object]) -> SafeTimeProvider:
        # The clock is shared state, never duplicated.
        return self.clone()

    def __repr__(self) -> str:
        return f"SafeTimeProvider({self._inner!r})"
