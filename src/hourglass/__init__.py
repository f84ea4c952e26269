"""hourglass — one abstraction for "the current time".

Production code reads and waits on a :class:`SafeTimeProvider`.  Tests build
the same provider over a virtual clock and drive it through a
:class:`TimeControl`; waiting a month then takes microseconds.
"""

from hourglass.config import (
    RealClock,
    TimeSource,
    VirtualClock,
    VirtualClockAtNow,
    into_provider,
    time_source_from_env,
)
from hourglass.control import TimeControl
from hourglass.provider import SharedTimeProvider, TimeProvider
from hourglass.safe import SafeTimeProvider
from hourglass.system import SYSTEM_TIME_PROVIDER, SystemTimeProvider
from hourglass.virtual import VirtualTimeProvider

__all__ = [
    "SYSTEM_TIME_PROVIDER",
    "RealClock",
    "SafeTimeProvider",
    "SharedTimeProvider",
    "SystemTimeProvider",
    "TimeControl",
    "TimeProvider",
    "TimeSource",
    "VirtualClock",
    "VirtualClockAtNow",
    "VirtualTimeProvider",
    "into_provider",
    "time_source_from_env",
]
