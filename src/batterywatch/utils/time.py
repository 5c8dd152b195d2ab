# src/batterywatch/utils/time.py
"""Time and duration handling utilities."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta


class TimeUtils:
    """Time-related utility functions."""

    @staticmethod
    def now_localized() -> datetime:
        """Get current datetime with local timezone.

        Returns:
            Current datetime with local timezone
        """
        return datetime.now(UTC).astimezone()

    @staticmethod
    def whole_minutes(duration: timedelta) -> int:
        """Return the number of whole minutes in a duration.

        Args:
            duration: Duration to convert

        Returns:
            Minutes, rounded down
        """
        return int(duration.total_seconds() // 60)
