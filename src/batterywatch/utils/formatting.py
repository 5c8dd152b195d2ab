"""Text formatting utilities for notification messages."""

from __future__ import annotations

from datetime import timedelta

from batterywatch.utils.time import TimeUtils


def format_percentage(value: float) -> str:
    """Format a 0-100 charge value as a whole percentage.

    Args:
        value: Charge percentage

    Returns:
        Formatted percentage string, e.g. "15%"
    """
    return f"{value:.0f}%"


def format_remaining(duration: timedelta) -> str:
    """Format a time-to-empty estimate.

    Args:
        duration: Remaining time

    Returns:
        Whole minutes, e.g. "42 min"
    """
    return f"{TimeUtils.whole_minutes(duration)} min"
