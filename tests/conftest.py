from datetime import UTC, datetime, timedelta

import pytest

from batterywatch.system.protocols import MockNotificationDisplay


class FakeClock:
    """Manually advanced clock for the monitor loop."""

    def __init__(self, start: datetime) -> None:
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs: float) -> None:
        self.now += timedelta(**kwargs)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock(datetime(2025, 5, 3, 14, 0, tzinfo=UTC))


@pytest.fixture
def display() -> MockNotificationDisplay:
    return MockNotificationDisplay()
