"""Monitor loop for the battery watcher."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import Final

from batterywatch.battery.classifier import (
    DEFAULT_POLICY,
    SeverityPolicy,
    aggregate,
    should_notify,
)
from batterywatch.battery.models import Reading, SeverityLevel
from batterywatch.battery.sampler import Sampler
from batterywatch.constants import POLL_INTERVAL
from batterywatch.notify.notifier import Notifier
from batterywatch.utils.time import TimeUtils

logger: Final = logging.getLogger(__name__)


@dataclass
class MonitorState:
    """Severity and notification clock carried from one tick to the next."""

    severity: SeverityLevel = SeverityLevel.NORMAL
    last_notified_at: datetime = field(default_factory=TimeUtils.now_localized)


@dataclass(frozen=True)
class TickResult:
    """Outcome of a single tick."""

    readings: list[Reading]
    worst: Reading | None
    previous: SeverityLevel
    severity: SeverityLevel
    notified: bool


class BatteryMonitor:
    """Drives sample → classify → notify → sleep.

    One tick runs to completion before the next begins. A ``SampleError``
    raised by the sampler is not handled here: the monitor is meant to run
    under a process supervisor that restarts it.
    """

    def __init__(
        self,
        sampler: Sampler,
        notifier: Notifier,
        policy: SeverityPolicy = DEFAULT_POLICY,
        poll_interval: timedelta = POLL_INTERVAL,
        clock: Callable[[], datetime] = TimeUtils.now_localized,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        """Initialize the monitor.

        Args:
            sampler: Source of per-battery readings
            notifier: Alert renderer
            policy: Thresholds and renewal intervals
            poll_interval: Time to sleep between ticks
            clock: Returns the current time
            sleep: Sleeps for the given number of seconds
        """
        self.sampler = sampler
        self.notifier = notifier
        self.policy = policy
        self.poll_interval = poll_interval
        self.clock = clock
        self.sleep = sleep
        self.state = MonitorState(last_notified_at=clock())

    def tick(self) -> TickResult:
        """Run one sample/classify/notify step and update the state."""
        readings = self.sampler.sample()
        worst = aggregate(readings)
        previous = self.state.severity
        severity = (
            self.policy.level_for(worst.percentage) if worst is not None else SeverityLevel.NORMAL
        )
        now = self.clock()

        notified = False
        if should_notify(previous, severity, self.state.last_notified_at, now, self.policy):
            if severity is not SeverityLevel.NORMAL and worst is not None:
                notified = self.notifier.notify(severity, worst)
            self.state.last_notified_at = now

        if severity != previous:
            logger.info("Battery level %s → %s", previous.name, severity.name)
        self.state.severity = severity

        return TickResult(
            readings=readings,
            worst=worst,
            previous=previous,
            severity=severity,
            notified=notified,
        )

    def run(self, max_ticks: int | None = None) -> None:
        """Run the monitor loop.

        Args:
            max_ticks: Stop after this many ticks (default: run forever)
        """
        logger.info(
            "Monitoring batteries every %.0f s (low < %.0f%%, critical < %.0f%%)",
            self.poll_interval.total_seconds(),
            self.policy.low_threshold,
            self.policy.critical_threshold,
        )

        ticks = 0
        while True:
            result = self.tick()
            ticks += 1
            if result.worst is not None:
                logger.debug(
                    "Worst battery %.1f%% → %s",
                    result.worst.percentage,
                    result.severity.name,
                )

            if max_ticks is not None and ticks >= max_ticks:
                break

            self.sleep(self.poll_interval.total_seconds())
