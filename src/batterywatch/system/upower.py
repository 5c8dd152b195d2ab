"""UPower device reader over the D-Bus system bus."""

from __future__ import annotations

import logging
from typing import Any, Final

from batterywatch.battery.errors import DeviceReadError, PowerServiceError
from batterywatch.constants import UPOWER_PATH, UPOWER_SERVICE
from batterywatch.system.protocols import DeviceProperties

logger: Final = logging.getLogger(__name__)


class UPowerDeviceReader:
    """Reads battery devices from UPower.

    The bus connection is opened lazily on first use and kept for the
    lifetime of the reader; device proxies are created per call so that
    hot-plugged batteries are picked up on the next enumeration.
    """

    def __init__(self, bus: Any | None = None) -> None:
        """Initialize the reader.

        Args:
            bus: Optional pre-connected pydbus bus (useful for testing)
        """
        self._bus: Any | None = bus

    @property
    def bus(self) -> Any:
        """Return the system bus, connecting on first access.

        Raises:
            PowerServiceError: If no system bus connection can be made
        """
        if self._bus is None:
            try:
                # Import the binding only when needed
                from pydbus import SystemBus  # type: ignore[import-untyped]

                self._bus = SystemBus()
                logger.debug("Connected to the D-Bus system bus")
            except Exception as exc:
                raise PowerServiceError(
                    "Cannot establish a dbus connection", original_error=exc
                ) from exc
        return self._bus

    def list_battery_devices(self) -> list[str]:
        """Enumerate every device known to UPower.

        Returns:
            Device object paths

        Raises:
            PowerServiceError: If UPower cannot be queried
        """
        try:
            upower = self.bus.get(UPOWER_SERVICE, UPOWER_PATH)
        except PowerServiceError:
            raise
        except Exception as exc:
            raise PowerServiceError(
                "Cannot query upower interface service", original_error=exc
            ) from exc

        try:
            return [str(path) for path in upower.EnumerateDevices()]
        except Exception as exc:
            raise PowerServiceError("Cannot enumerate devices", original_error=exc) from exc

    def _device(self, device: str) -> Any:
        try:
            return self.bus.get(UPOWER_SERVICE, device)
        except Exception as exc:
            raise DeviceReadError(
                device, "Cannot query upower device interface", original_error=exc
            ) from exc

    def read_type(self, device: str) -> int:
        """Return the UPower ``Type`` property of a device.

        Raises:
            DeviceReadError: If the property cannot be read
        """
        proxy = self._device(device)
        try:
            return int(proxy.Type)
        except Exception as exc:
            raise DeviceReadError(
                device, "Cannot detect type of device", original_error=exc
            ) from exc

    def read(self, device: str) -> DeviceProperties:
        """Read state, percentage and time-to-empty of a device.

        Raises:
            DeviceReadError: If any property cannot be read
        """
        proxy = self._device(device)
        values: dict[str, Any] = {}
        for prop in ("State", "Percentage", "TimeToEmpty"):
            try:
                values[prop] = getattr(proxy, prop)
            except Exception as exc:
                raise DeviceReadError(
                    device, f"Cannot retrieve '{prop}' information", original_error=exc
                ) from exc

        return DeviceProperties(
            charging_state_code=int(values["State"]),
            percentage=float(values["Percentage"]),
            time_to_empty_seconds=int(values["TimeToEmpty"]),
        )
