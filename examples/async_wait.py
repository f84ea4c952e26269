"""
hourglass — Async Wait

The same scheduling code runs against the real clock and a virtual one.
On the virtual clock, three concurrent tasks "wait" hours in microseconds.
"""

import asyncio
from datetime import UTC, datetime, timedelta

from hourglass import SafeTimeProvider, VirtualClock

# ─── Your code (only ever sees now / wait / wait_until) ───


async def scheduled_task(time: SafeTimeProvider, name: str, duration: timedelta) -> str:
    start = time.now()
    print(f"  [{name}] starting at {start:%Y-%m-%d %H:%M:%S}")
    await time.wait(duration)
    end = time.now()
    print(f"  [{name}] done at     {end:%Y-%m-%d %H:%M:%S}")
    return f"{name} observed {(end - start).total_seconds():.0f}s"


async def wait_until_task(time: SafeTimeProvider, deadline: datetime) -> str:
    start = time.now()
    await time.wait_until(deadline)
    return f"deadline task observed {(time.now() - start).total_seconds():.0f}s"


async def main():
    # ──────────────────────────────────────
    #  1. Production: real sleeps
    # ──────────────────────────────────────
    print("System clock:")
    real = SafeTimeProvider()
    print(f"  test mode: {real.is_test_mode()}, control: {real.test_control()}")
    print(" ", await scheduled_task(real, "short", timedelta(milliseconds=100)))

    # ──────────────────────────────────────
    #  2. Tests: a shared virtual clock
    # ──────────────────────────────────────
    print("\nVirtual clock:")
    time = SafeTimeProvider(VirtualClock(datetime(2024, 1, 1, tzinfo=UTC)))
    control = time.test_control()
    assert control is not None

    results = await asyncio.gather(
        scheduled_task(time.clone(), "task1", timedelta(hours=1)),
        scheduled_task(time.clone(), "task2", timedelta(hours=2)),
        wait_until_task(time.clone(), time.now() + timedelta(hours=3)),
    )
    for line in results:
        print(" ", line)

    # Waits are additive: the shared clock moved by the sum of all waits.
    print(f"\n  clock now:     {time.now():%Y-%m-%d %H:%M:%S}")
    print(f"  {control!r}")

    control.advance(timedelta(days=30))
    print(f"  after advance: {time.now():%Y-%m-%d %H:%M:%S}")


if __name__ == "__main__":
    asyncio.run(main())
