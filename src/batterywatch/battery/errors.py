"""Exception classes for battery sampling and notification.

This module defines a hierarchy of exception classes for the error
conditions the monitor distinguishes: fatal service failures, per-device
read failures, protocol mismatches, and notification display failures.
"""

from __future__ import annotations

from typing import Optional


class BatteryWatchError(Exception):
    """Base class for all monitor errors.

    Carries a human-readable message and, when available, the underlying
    exception raised by the D-Bus binding.
    """

    def __init__(
        self, message: str, original_error: Optional[Exception] = None
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error message
            original_error: The original exception that was caught
        """
        super().__init__(message)
        self.message: str = message
        self.original_error: Optional[Exception] = original_error


class SampleError(BatteryWatchError):
    """Raised when a whole sample cannot be taken."""

    pass


class PowerServiceError(SampleError):
    """Raised when the power-management service cannot be reached or
    cannot enumerate its devices."""

    pass


class DeviceReadError(BatteryWatchError):
    """Raised when a single device's type or properties cannot be read."""

    def __init__(
        self,
        device: str,
        message: str,
        original_error: Optional[Exception] = None,
    ) -> None:
        """Initialize with the failing device.

        Args:
            device: Object path of the device
            message: Description of the read failure
            original_error: The original exception that was caught
        """
        super().__init__(f"{device}: {message}", original_error)
        self.device = device


class ProtocolError(BatteryWatchError):
    """Raised when the service reports a charging-state code outside the
    documented range."""

    def __init__(self, code: int) -> None:
        super().__init__(f"Invalid charging state code: {code}")
        self.code = code


class NotifyError(BatteryWatchError):
    """Raised when a notification cannot be displayed."""

    pass
