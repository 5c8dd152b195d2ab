from datetime import timedelta

import pytest

from batterywatch.battery.errors import ProtocolError
from batterywatch.battery.models import ChargingState, Reading, SeverityLevel


@pytest.mark.parametrize(
    "code, expected",
    [
        (0, ChargingState.UNKNOWN),
        (1, ChargingState.CHARGING),
        (2, ChargingState.DISCHARGING),
        (3, ChargingState.EMPTY),
        (4, ChargingState.FULLY_CHARGED),
        (5, ChargingState.PENDING_CHARGE),
        (6, ChargingState.PENDING_DISCHARGE),
    ],
)
def test_from_code_maps_upower_states(code: int, expected: ChargingState) -> None:
    assert ChargingState.from_code(code) is expected


@pytest.mark.parametrize("code", [-1, 7, 42])
def test_from_code_rejects_unknown_codes(code: int) -> None:
    with pytest.raises(ProtocolError) as exc_info:
        ChargingState.from_code(code)
    assert exc_info.value.code == code
    assert str(code) in str(exc_info.value)


def test_only_discharging_and_empty_are_depleting() -> None:
    depleting = {s for s in ChargingState if s.is_depleting}
    assert depleting == {ChargingState.DISCHARGING, ChargingState.EMPTY}


def test_severity_levels_are_ordered() -> None:
    assert SeverityLevel.NORMAL < SeverityLevel.LOW < SeverityLevel.CRITICAL
    assert max(SeverityLevel) is SeverityLevel.CRITICAL
    assert SeverityLevel.NORMAL <= SeverityLevel.LOW
    assert SeverityLevel.LOW <= SeverityLevel.LOW
    assert SeverityLevel.CRITICAL >= SeverityLevel.LOW
    assert SeverityLevel.CRITICAL > SeverityLevel.NORMAL
    assert not SeverityLevel.NORMAL >= SeverityLevel.CRITICAL


def test_reading_comparability() -> None:
    assert Reading(50.0, ChargingState.DISCHARGING).is_comparable is True
    assert Reading(float("nan"), ChargingState.DISCHARGING).is_comparable is False
    assert Reading(float("inf"), ChargingState.DISCHARGING).is_comparable is False


def test_reading_time_to_empty() -> None:
    assert Reading(50.0, ChargingState.CHARGING).has_time_to_empty is False
    reading = Reading(50.0, ChargingState.DISCHARGING, timedelta(minutes=30))
    assert reading.has_time_to_empty is True


def test_reading_equality_ignores_device() -> None:
    a = Reading(12.0, ChargingState.DISCHARGING, device="/BAT0")
    b = Reading(12.0, ChargingState.DISCHARGING, device="/BAT1")
    assert a == b
