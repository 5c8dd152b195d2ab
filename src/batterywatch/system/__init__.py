# src/batterywatch/system/__init__.py
"""System module for power-service access."""

from batterywatch.system.protocols import DeviceProperties, DeviceReader, NotificationDisplay
from batterywatch.system.upower import UPowerDeviceReader

__all__ = [
    "DeviceProperties",
    "DeviceReader",
    "NotificationDisplay",
    "UPowerDeviceReader",
]
