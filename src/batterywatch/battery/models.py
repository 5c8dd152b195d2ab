"""Battery reading and severity models."""

from __future__ import annotations

import functools
import math
from dataclasses import dataclass, field
from datetime import timedelta
from enum import Enum

from batterywatch.battery.errors import ProtocolError


class ChargingState(Enum):
    """Charging state as reported by UPower's ``State`` property."""

    UNKNOWN = 0
    CHARGING = 1
    DISCHARGING = 2
    EMPTY = 3
    FULLY_CHARGED = 4
    PENDING_CHARGE = 5
    PENDING_DISCHARGE = 6

    @classmethod
    def from_code(cls, code: int) -> ChargingState:
        """Map a UPower state code to a ChargingState.

        Args:
            code: Integer code from the ``State`` property

        Returns:
            The matching ChargingState

        Raises:
            ProtocolError: If the code is outside the documented range
        """
        try:
            return cls(code)
        except ValueError as exc:
            raise ProtocolError(code) from exc

    @property
    def is_depleting(self) -> bool:
        """Return True if the battery is running down."""
        return self in (ChargingState.DISCHARGING, ChargingState.EMPTY)


@functools.total_ordering
class SeverityLevel(Enum):
    """Coarse classification of the battery charge."""

    NORMAL = 0
    LOW = 1
    CRITICAL = 2

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, SeverityLevel):
            return NotImplemented
        return self.value < other.value


@dataclass(frozen=True)
class Reading:
    """One battery's state at a point in time.

    ``time_to_empty`` is zero when the device does not report an estimate,
    which UPower does whenever the battery is not discharging.
    """

    percentage: float
    charging_state: ChargingState
    time_to_empty: timedelta = timedelta(0)
    device: str = field(default="", compare=False)

    @property
    def is_comparable(self) -> bool:
        """Return True if the percentage can be ordered against others."""
        return math.isfinite(self.percentage)

    @property
    def has_time_to_empty(self) -> bool:
        return self.time_to_empty > timedelta(0)
