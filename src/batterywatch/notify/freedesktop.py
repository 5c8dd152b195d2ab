"""Desktop notifications over the freedesktop.org D-Bus interface."""

from __future__ import annotations

import logging
from typing import Any, Final

from batterywatch.battery.errors import NotifyError
from batterywatch.common.enums import NotificationTimeout, Urgency
from batterywatch.constants import APP_NAME, NOTIFICATIONS_SERVICE

logger: Final = logging.getLogger(__name__)


class FreedesktopNotificationDisplay:
    """Shows notifications through ``org.freedesktop.Notifications``.

    Each notification replaces the previous one shown by this display, so a
    renewed alert updates the existing bubble instead of stacking.
    """

    def __init__(self, app_name: str = APP_NAME, bus: Any | None = None) -> None:
        """Initialize the display.

        Args:
            app_name: Application name reported to the notification server
            bus: Optional pre-connected pydbus session bus (useful for testing)
        """
        self.app_name = app_name
        self._bus: Any | None = bus
        self._last_id = 0

    def _variant(self, signature: str, value: Any) -> Any:
        from gi.repository import GLib  # type: ignore[import-untyped]

        return GLib.Variant(signature, value)

    def _service(self) -> Any:
        if self._bus is None:
            from pydbus import SessionBus  # type: ignore[import-untyped]

            self._bus = SessionBus()
        return self._bus.get(NOTIFICATIONS_SERVICE)

    def show(
        self,
        summary: str,
        icon: str,
        urgency: Urgency,
        timeout: NotificationTimeout,
        body: str,
    ) -> None:
        """Send a notification to the session's notification server.

        Raises:
            NotifyError: If the session bus or the server is unavailable
        """
        try:
            service = self._service()
            hints = {"urgency": self._variant("y", urgency.value)}
            self._last_id = service.Notify(
                self.app_name,
                self._last_id,
                icon,
                summary,
                body,
                [],
                hints,
                timeout.value,
            )
        except Exception as exc:
            raise NotifyError("Cannot show notification", original_error=exc) from exc

        logger.debug("Notification id %d shown", self._last_id)
