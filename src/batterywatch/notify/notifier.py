"""Low-battery notification rendering."""

from __future__ import annotations

import logging
from typing import Final

from batterywatch.battery.models import Reading, SeverityLevel
from batterywatch.common.enums import NotificationTimeout, Urgency
from batterywatch.constants import NOTIFICATION_ICON, NOTIFICATION_SUMMARY
from batterywatch.system.protocols import NotificationDisplay
from batterywatch.utils.formatting import format_percentage, format_remaining

logger: Final = logging.getLogger(__name__)

# Urgency and expiration per alerting level
LEVEL_STYLES: Final = {
    SeverityLevel.LOW: (Urgency.NORMAL, NotificationTimeout.DEFAULT),
    SeverityLevel.CRITICAL: (Urgency.CRITICAL, NotificationTimeout.NEVER),
}


class Notifier:
    """Turns a severity level and reading into a desktop notification.

    Low alerts use normal urgency and expire on their own; critical alerts
    use critical urgency and stay until dismissed. Normal never alerts.
    Display failures are logged and swallowed so they cannot stop the
    monitor loop.
    """

    def __init__(
        self,
        display: NotificationDisplay,
        summary: str = NOTIFICATION_SUMMARY,
        icon: str = NOTIFICATION_ICON,
    ) -> None:
        """Initialize the notifier.

        Args:
            display: Notification server adapter
            summary: Notification title
            icon: Icon name from the desktop icon theme
        """
        self.display = display
        self.summary = summary
        self.icon = icon

    @staticmethod
    def format_body(reading: Reading) -> str:
        """Build the notification text for a reading.

        Args:
            reading: The reading that triggered the alert

        Returns:
            E.g. "Battery capacity is 15% (remaining: 42 min)"; the remaining
            time is omitted when the device does not report one
        """
        body = f"Battery capacity is {format_percentage(reading.percentage)}"
        if reading.has_time_to_empty:
            body += f" (remaining: {format_remaining(reading.time_to_empty)})"
        return body

    def notify(self, level: SeverityLevel, reading: Reading) -> bool:
        """Display an alert for ``level``.

        Args:
            level: Severity computed on this tick
            reading: Aggregate reading of this tick

        Returns:
            True if a notification was displayed
        """
        style = LEVEL_STYLES.get(level)
        if style is None:
            return False

        urgency, timeout = style
        body = self.format_body(reading)
        try:
            self.display.show(self.summary, self.icon, urgency, timeout, body)
        except Exception as exc:
            logger.warning("Could not display %s notification: %s", level.name.lower(), exc)
            return False

        logger.info("Displayed %s notification: %s", level.name.lower(), body)
        return True
