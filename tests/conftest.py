"""Shared test fixtures."""

from datetime import UTC, datetime

import pytest

from hourglass import SafeTimeProvider, VirtualClock

START = datetime(2024, 1, 1, tzinfo=UTC)


@pytest.fixture
def start():
    return START


@pytest.fixture
def provider():
    return SafeTimeProvider(VirtualClock(START))


@pytest.fixture
def control(provider):
    return provider.test_control()


@pytest.fixture
def system_provider():
    return SafeTimeProvider()
