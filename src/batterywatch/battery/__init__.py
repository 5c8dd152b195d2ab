"""Battery package - holds readings, classification, sampling, and errors."""

from .classifier import (
    DEFAULT_POLICY,
    SeverityPolicy,
    aggregate,
    classify,
    renewal_interval,
    should_notify,
)
from .errors import (
    BatteryWatchError,
    DeviceReadError,
    NotifyError,
    PowerServiceError,
    ProtocolError,
    SampleError,
)
from .models import ChargingState, Reading, SeverityLevel
from .sampler import Sampler

__all__ = [
    "DEFAULT_POLICY",
    "BatteryWatchError",
    "ChargingState",
    "DeviceReadError",
    "NotifyError",
    "PowerServiceError",
    "ProtocolError",
    "Reading",
    "SampleError",
    "Sampler",
    "SeverityLevel",
    "SeverityPolicy",
    "aggregate",
    "classify",
    "renewal_interval",
    "should_notify",
]
