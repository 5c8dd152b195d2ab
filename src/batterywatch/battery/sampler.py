"""Battery sampling from the power-management service."""

from __future__ import annotations

import logging
from datetime import timedelta
from typing import TYPE_CHECKING, Final

from batterywatch.battery.errors import DeviceReadError
from batterywatch.battery.models import ChargingState, Reading
from batterywatch.constants import DEVICE_TYPE_BATTERY

if TYPE_CHECKING:
    from batterywatch.system.protocols import DeviceReader

logger: Final = logging.getLogger(__name__)


class Sampler:
    """Collects one Reading per battery device.

    A device whose type or properties cannot be read is logged and skipped
    so a single bad device never aborts the sample. Failures to reach the
    service at all propagate as ``PowerServiceError``, and unknown
    charging-state codes propagate as ``ProtocolError``.
    """

    def __init__(self, reader: DeviceReader) -> None:
        self.reader = reader

    def sample(self) -> list[Reading]:
        """Read every battery device once.

        Returns:
            Readings in enumeration order
        """
        readings: list[Reading] = []

        for device in self.reader.list_battery_devices():
            try:
                device_type = self.reader.read_type(device)
            except DeviceReadError as err:
                logger.warning("Skipping device: %s", err.message)
                continue

            if device_type != DEVICE_TYPE_BATTERY:
                continue

            try:
                props = self.reader.read(device)
            except DeviceReadError as err:
                logger.warning("Skipping battery: %s", err.message)
                continue

            reading = Reading(
                percentage=props["percentage"],
                charging_state=ChargingState.from_code(props["charging_state_code"]),
                time_to_empty=timedelta(seconds=max(props["time_to_empty_seconds"], 0)),
                device=device,
            )
            if not reading.is_comparable:
                logger.warning(
                    "%s reports percentage %r, ignoring it for classification",
                    device,
                    reading.percentage,
                )
            logger.debug(
                "%s: %.1f%% %s (time to empty %s)",
                device,
                reading.percentage,
                reading.charging_state.name,
                reading.time_to_empty,
            )
            readings.append(reading)

        return readings
