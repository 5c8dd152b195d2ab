"""Notification package - holds message rendering and the desktop adapter."""

from batterywatch.notify.freedesktop import FreedesktopNotificationDisplay
from batterywatch.notify.notifier import Notifier

__all__ = ["FreedesktopNotificationDisplay", "Notifier"]
