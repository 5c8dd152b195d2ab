"""Severity classification and notification throttling.

Both functions here are pure: the persistent severity and notification
timestamp are owned by the monitor loop and passed in on every tick.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Final

from batterywatch.battery.models import Reading, SeverityLevel
from batterywatch.constants import (
    CRITICAL_RENEWAL_INTERVAL,
    CRITICAL_THRESHOLD,
    LOW_RENEWAL_INTERVAL,
    LOW_THRESHOLD,
)


@dataclass(frozen=True)
class SeverityPolicy:
    """Thresholds and renewal intervals used to classify readings.

    A reading below ``critical_threshold`` is critical, one below
    ``low_threshold`` is low. Lower bounds are inclusive: exactly 10.0 is
    low and exactly 20.0 is normal with the default thresholds.
    """

    low_threshold: float = LOW_THRESHOLD
    critical_threshold: float = CRITICAL_THRESHOLD
    low_renewal: timedelta = LOW_RENEWAL_INTERVAL
    critical_renewal: timedelta = CRITICAL_RENEWAL_INTERVAL

    def level_for(self, percentage: float) -> SeverityLevel:
        if percentage < self.critical_threshold:
            return SeverityLevel.CRITICAL
        if percentage < self.low_threshold:
            return SeverityLevel.LOW
        return SeverityLevel.NORMAL


DEFAULT_POLICY: Final = SeverityPolicy()


def aggregate(readings: Sequence[Reading]) -> Reading | None:
    """Pick the reading that represents all batteries on this tick.

    If any battery is charging, full, or otherwise not depleting, the
    machine is on mains and there is nothing to represent. This holds even
    for a battery whose percentage is not finite; such readings are only
    left out when choosing the minimum.

    Args:
        readings: Per-device readings from one sample

    Returns:
        The reading with the lowest percentage, or None when on mains or
        when no comparable reading exists
    """
    if not all(r.charging_state.is_depleting for r in readings):
        return None

    comparable = [r for r in readings if r.is_comparable]
    if not comparable:
        return None

    return min(comparable, key=lambda r: r.percentage)


def classify(
    readings: Sequence[Reading], policy: SeverityPolicy = DEFAULT_POLICY
) -> SeverityLevel:
    """Map one tick's readings to a severity level.

    Args:
        readings: Per-device readings from one sample
        policy: Thresholds to apply

    Returns:
        NORMAL when on mains or without readings, otherwise the level of
        the worst battery
    """
    worst = aggregate(readings)
    if worst is None:
        return SeverityLevel.NORMAL
    return policy.level_for(worst.percentage)


def renewal_interval(
    level: SeverityLevel, policy: SeverityPolicy = DEFAULT_POLICY
) -> timedelta:
    """Return the minimum time between repeated alerts at ``level``."""
    if level is SeverityLevel.CRITICAL:
        return policy.critical_renewal
    if level is SeverityLevel.LOW:
        return policy.low_renewal
    return timedelta.max


def should_notify(
    previous: SeverityLevel,
    next_level: SeverityLevel,
    last_notified_at: datetime,
    now: datetime,
    policy: SeverityPolicy = DEFAULT_POLICY,
) -> bool:
    """Decide whether the notification step fires on this tick.

    Fires on any level change, or once the renewal interval of the
    previous level has elapsed since the last notification.

    Args:
        previous: Severity held before this tick
        next_level: Severity computed on this tick
        last_notified_at: When the notification step last fired
        now: Current time

    Returns:
        True if the notification step must run
    """
    if next_level != previous:
        return True
    return now - last_notified_at >= renewal_interval(previous, policy)
