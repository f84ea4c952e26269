# Copyright (c) 2024 OpenMined
# SPDX-License-Identifier: Apache-2.0
"""Time source selection.

A time source is one of three variants, chosen once at startup:

* :class:`RealClock` — the system clock (production default)
* :class:`VirtualClock` — a virtual clock starting at a fixed instant
* :class:`VirtualClockAtNow` — a virtual clock starting at the current time

Environment:
    TIME_SOURCE: ``"test"`` for a virtual clock, anything else for the
                 system clock.
    TIME_START:  RFC 3339 start timestamp for the virtual clock.
"""

from __future__ import annotations

import os
import warnings
from collections.abc import Mapping
from dataclasses import dataclass
from datetime import UTC, datetime

from pydantic import ValidationError

from hourglass.provider import TimeProvider, ensure_utc
from hourglass.schema import TimeSourceConfigSchema
from hourglass.system import SYSTEM_TIME_PROVIDER
from hourglass.virtual import VirtualTimeProvider


@dataclass(frozen=True)
class RealClock:
    """Use the system clock."""


@dataclass(frozen=True)
class VirtualClock:
    """Use a virtual clock starting at *start*."""

    start: datetime

    def __post_init__(self) -> None:
        object.__setattr__(self, "start", ensure_utc(self.start, "start"))


@dataclass(frozen=True)
class VirtualClockAtNow:
    """Use a virtual clock starting at the system time of construction."""


TimeSource = RealClock | VirtualClock | VirtualClockAtNow


def time_source_from_env(environ: Mapping[str, str] | None = None) -> TimeSource:
    """Read the time source from *environ* (defaults to ``os.environ``).

    A malformed ``TIME_START`` does not fail: it emits a ``RuntimeWarning``
    and falls back to a virtual clock starting now.
    """
    config = TimeSourceConfigSchema.model_validate(
        dict(os.environ if environ is None else environ)
    )
    return time_source_from_config(config)


def time_source_from_config(config: TimeSourceConfigSchema) -> TimeSource:
    if not config.is_test:
        return RealClock()
    if config.start is None:
        return VirtualClockAtNow()
    try:
        start = config.parse_start()
    except ValidationError:
        warnings.warn(
            f"Invalid TIME_START format {config.start!r}, using current time",
            RuntimeWarning,
            stacklevel=3,
        )
        return VirtualClockAtNow()
    return VirtualClock(start.astimezone(UTC))


def into_provider(source: TimeSource) -> TimeProvider:
    """Build a bare provider for *source*.

    The result only offers the read-and-wait contract.  Use
    :class:`~hourglass.safe.SafeTimeProvider` to keep access to time control
    for virtual clocks.
    """
    if isinstance(source, RealClock):
        return SYSTEM_TIME_PROVIDER
    return new_virtual_provider(source)


def new_virtual_provider(source: VirtualClock | VirtualClockAtNow) -> VirtualTimeProvider:
    if isinstance(source, VirtualClock):
        return VirtualTimeProvider(source.start)
    if isinstance(source, VirtualClockAtNow):
        return VirtualTimeProvider.at_now()
    raise TypeError(f"Not a virtual time source: {source!r}")
