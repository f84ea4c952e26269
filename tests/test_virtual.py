"""Tests for VirtualTimeProvider."""

from datetime import UTC, datetime, timedelta, timezone

import pytest

from hourglass import VirtualTimeProvider

START = datetime(2024, 1, 1, tzinfo=UTC)


@pytest.fixture
def clock():
    return VirtualTimeProvider(START)


def test_starts_at_given_instant(clock):
    assert clock.now() == START
    assert clock.is_test()


def test_rejects_naive_start():
    with pytest.raises(ValueError, match="timezone-aware"):
        VirtualTimeProvider(datetime(2024, 1, 1))


def test_normalises_start_to_utc():
    clock = VirtualTimeProvider(datetime(2024, 1, 1, 2, tzinfo=timezone(timedelta(hours=2))))
    assert clock.now() == START
    assert clock.now().tzinfo is UTC


def test_at_now_starts_at_system_time():
    before = datetime.now(UTC)
    clock = VirtualTimeProvider.at_now()
    after = datetime.now(UTC)
    assert before <= clock.now() <= after


@pytest.mark.parametrize(
    "duration",
    [timedelta(0), timedelta(seconds=1), timedelta(days=365 * 30), timedelta(microseconds=1)],
)
async def test_wait_moves_clock_by_duration(clock, duration):
    before = clock.now()
    await clock.wait(duration)
    assert clock.now() == before + duration


async def test_wait_tracks_statistics(clock):
    for hours in (1, 2, 3):
        await clock.wait(timedelta(hours=hours))
    assert clock.total_waited() == timedelta(hours=6)
    assert clock.wait_call_count() == 3


async def test_zero_wait_still_counts(clock):
    await clock.wait(timedelta(0))
    assert clock.now() == START
    assert clock.wait_call_count() == 1


async def test_negative_wait_moves_clock_backwards(clock):
    await clock.wait(timedelta(hours=-1))
    assert clock.now() == START - timedelta(hours=1)
    assert clock.total_waited() == timedelta(hours=-1)
    assert clock.wait_call_count() == 1


def test_advance_does_not_touch_statistics(clock):
    clock.advance(timedelta(days=3))
    assert clock.now() == START + timedelta(days=3)
    assert clock.total_waited() == timedelta(0)
    assert clock.wait_call_count() == 0


def test_advance_accepts_negative_duration(clock):
    clock.advance(timedelta(minutes=-5))
    assert clock.now() == START - timedelta(minutes=5)


def test_set_does_not_touch_statistics(clock):
    target = datetime(2030, 6, 15, 12, tzinfo=UTC)
    clock.set(target)
    assert clock.now() == target
    assert clock.wait_call_count() == 0


def test_set_rejects_naive_instant(clock):
    with pytest.raises(ValueError):
        clock.set(datetime(2030, 1, 1))


async def test_reset_wait_tracking_keeps_current_instant(clock):
    await clock.wait(timedelta(hours=5))
    clock.reset_wait_tracking()
    assert clock.total_waited() == timedelta(0)
    assert clock.wait_call_count() == 0
    assert clock.now() == START + timedelta(hours=5)


async def test_wait_until_future_deadline_lands_on_it(clock):
    deadline = START + timedelta(hours=12)
    await clock.wait_until(deadline)
    assert clock.now() == deadline
    assert clock.total_waited() == timedelta(hours=12)
    assert clock.wait_call_count() == 1


async def test_wait_until_past_deadline_is_noop(clock):
    await clock.wait_until(datetime(2023, 12, 31, 23, tzinfo=UTC))
    assert clock.now() == START
    assert clock.wait_call_count() == 0
    assert clock.total_waited() == timedelta(0)


async def test_wait_until_equal_deadline_is_noop(clock):
    await clock.wait_until(START)
    assert clock.now() == START
    assert clock.wait_call_count() == 0


def test_repr_shows_current_instant(clock):
    assert "2024-01-01T00:00:00+00:00" in repr(clock)


async def test_wait_until_rejects_naive_deadline(clock):
    with pytest.raises(ValueError, match="timezone-aware"):
        await clock.wait_until(datetime(2030, 1, 1))
    assert clock.wait_call_count() == 0
