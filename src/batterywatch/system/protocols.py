# src/batterywatch/system/protocols.py
from __future__ import annotations

from typing import Protocol, TypedDict, runtime_checkable

from batterywatch.battery.errors import DeviceReadError, NotifyError, PowerServiceError
from batterywatch.common.enums import NotificationTimeout, Urgency
from batterywatch.constants import DEVICE_TYPE_BATTERY


class DeviceProperties(TypedDict):
    """Raw properties of one power device."""

    charging_state_code: int
    percentage: float
    time_to_empty_seconds: int


@runtime_checkable
class DeviceReader(Protocol):
    """Protocol defining read access to the power-management service.

    This protocol abstracts the D-Bus details of UPower so the sampler can
    be exercised without a system bus.
    """

    def list_battery_devices(self) -> list[str]:
        """Enumerate power devices.

        Returns:
            Object paths of every device known to the service

        Raises:
            PowerServiceError: If the service cannot be reached
        """
        ...

    def read_type(self, device: str) -> int:
        """Return the device type code.

        Raises:
            DeviceReadError: If the property cannot be read
        """
        ...

    def read(self, device: str) -> DeviceProperties:
        """Read the charge-related properties of a device.

        Raises:
            DeviceReadError: If any property cannot be read
        """
        ...


@runtime_checkable
class NotificationDisplay(Protocol):
    """Protocol defining the interface for desktop notification servers."""

    def show(
        self,
        summary: str,
        icon: str,
        urgency: Urgency,
        timeout: NotificationTimeout,
        body: str,
    ) -> None:
        """Display a notification.

        Args:
            summary: Single-line title
            icon: Icon name from the desktop icon theme
            urgency: Urgency level
            timeout: Expiration behaviour
            body: Message text

        Raises:
            NotifyError: If the notification cannot be displayed
        """
        ...


class MockDeviceReader:
    """In-memory DeviceReader for testing."""

    def __init__(
        self,
        devices: dict[str, DeviceProperties] | None = None,
        device_types: dict[str, int] | None = None,
        failing_types: set[str] | None = None,
        failing_reads: set[str] | None = None,
        unreachable: bool = False,
    ) -> None:
        """Initialize with fake devices.

        Args:
            devices: Properties keyed by object path, in enumeration order
            device_types: UPower type per device; unlisted devices are batteries
            failing_types: Devices whose type query raises DeviceReadError
            failing_reads: Devices whose property read raises DeviceReadError
            unreachable: If True, enumeration raises PowerServiceError
        """
        self.devices = devices or {}
        self.device_types = device_types or {}
        self.failing_types = failing_types or set()
        self.failing_reads = failing_reads or set()
        self.unreachable = unreachable
        self.read_calls: list[str] = []

    def list_battery_devices(self) -> list[str]:
        if self.unreachable:
            raise PowerServiceError("Simulated unreachable power service")
        return list(self.devices)

    def read_type(self, device: str) -> int:
        if device in self.failing_types:
            raise DeviceReadError(device, "Simulated type query failure")
        return self.device_types.get(device, DEVICE_TYPE_BATTERY)

    def read(self, device: str) -> DeviceProperties:
        self.read_calls.append(device)
        if device in self.failing_reads:
            raise DeviceReadError(device, "Simulated property read failure")
        return self.devices[device]


class MockNotificationDisplay:
    """Mock implementation of NotificationDisplay for testing."""

    def __init__(self) -> None:
        self.show_calls: list[dict[str, object]] = []

    def show(
        self,
        summary: str,
        icon: str,
        urgency: Urgency,
        timeout: NotificationTimeout,
        body: str,
    ) -> None:
        """Record the call without requiring a notification server."""
        self.show_calls.append(
            {
                "summary": summary,
                "icon": icon,
                "urgency": urgency,
                "timeout": timeout,
                "body": body,
            }
        )

    def reset_call_history(self) -> None:
        self.show_calls = []


class ErrorSimulatingNotificationDisplay(MockNotificationDisplay):
    """Notification display that always fails, after recording the call."""

    def show(
        self,
        summary: str,
        icon: str,
        urgency: Urgency,
        timeout: NotificationTimeout,
        body: str,
    ) -> None:
        super().show(summary, icon, urgency, timeout, body)
        raise NotifyError("Simulated notification server failure")


def battery_properties(
    percentage: float,
    charging_state_code: int = 2,
    time_to_empty_seconds: int = 0,
) -> DeviceProperties:
    """Build DeviceProperties for a battery, discharging by default."""
    return DeviceProperties(
        charging_state_code=charging_state_code,
        percentage=percentage,
        time_to_empty_seconds=time_to_empty_seconds,
    )
