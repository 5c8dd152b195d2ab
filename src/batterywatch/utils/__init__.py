"""Common utility functions and helpers for the batterywatch package."""

from batterywatch.utils.formatting import format_percentage, format_remaining
from batterywatch.utils.time import TimeUtils

__all__ = [
    "TimeUtils",
    "format_percentage",
    "format_remaining",
]
