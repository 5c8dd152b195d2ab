"""Tests for the UPower reader against a fake pydbus bus."""

from __future__ import annotations

from typing import Any

import pytest

from batterywatch.battery.errors import DeviceReadError, PowerServiceError
from batterywatch.battery.sampler import Sampler
from batterywatch.system.protocols import DeviceReader
from batterywatch.system.upower import UPowerDeviceReader

BAT0 = "/org/freedesktop/UPower/devices/battery_BAT0"
MOUSE = "/org/freedesktop/UPower/devices/mouse_dev_1"


class _FakeProxy:
    """Proxy exposing UPower properties as attributes; ``None`` values fail."""

    def __init__(self, **props: Any) -> None:
        self._props = props

    def __getattr__(self, name: str) -> Any:
        value = self._props.get(name)
        if value is None:
            raise RuntimeError(f"GDBus.Error: no property {name}")
        return value


class _FakeUPower:
    def __init__(self, paths: list[str], fail: bool = False) -> None:
        self.paths = paths
        self.fail = fail

    def EnumerateDevices(self) -> list[str]:  # noqa: N802
        if self.fail:
            raise RuntimeError("GDBus.Error: service unknown")
        return self.paths


class _FakeBus:
    def __init__(self, objects: dict[str, Any]) -> None:
        self.objects = objects
        self.requested: list[tuple[str, str]] = []

    def get(self, service: str, path: str) -> Any:
        self.requested.append((service, path))
        if path not in self.objects:
            raise RuntimeError(f"GDBus.Error: no object at {path}")
        return self.objects[path]


def _bus(fail_enumerate: bool = False) -> _FakeBus:
    return _FakeBus(
        {
            "/org/freedesktop/UPower": _FakeUPower([BAT0, MOUSE], fail=fail_enumerate),
            BAT0: _FakeProxy(Type=2, State=2, Percentage=17.0, TimeToEmpty=1800),
            MOUSE: _FakeProxy(Type=5, State=2, Percentage=60.0, TimeToEmpty=None),
        }
    )


def test_reader_satisfies_protocol() -> None:
    assert isinstance(UPowerDeviceReader(bus=_bus()), DeviceReader)


def test_list_devices() -> None:
    bus = _bus()
    assert UPowerDeviceReader(bus=bus).list_battery_devices() == [BAT0, MOUSE]
    assert bus.requested[0] == ("org.freedesktop.UPower", "/org/freedesktop/UPower")


def test_enumeration_failure_is_fatal() -> None:
    reader = UPowerDeviceReader(bus=_bus(fail_enumerate=True))
    with pytest.raises(PowerServiceError, match="Cannot enumerate devices"):
        reader.list_battery_devices()


def test_missing_service_is_fatal() -> None:
    reader = UPowerDeviceReader(bus=_FakeBus({}))
    with pytest.raises(PowerServiceError, match="Cannot query upower"):
        reader.list_battery_devices()


def test_read_properties() -> None:
    props = UPowerDeviceReader(bus=_bus()).read(BAT0)
    assert props == {
        "charging_state_code": 2,
        "percentage": 17.0,
        "time_to_empty_seconds": 1800,
    }


def test_read_failure_names_property() -> None:
    with pytest.raises(DeviceReadError, match="TimeToEmpty"):
        UPowerDeviceReader(bus=_bus()).read(MOUSE)


def test_read_type_of_vanished_device() -> None:
    with pytest.raises(DeviceReadError):
        UPowerDeviceReader(bus=_bus()).read_type("/org/freedesktop/UPower/devices/gone")


def test_sampler_over_upower() -> None:
    (reading,) = Sampler(UPowerDeviceReader(bus=_bus())).sample()
    assert reading.device == BAT0
    assert reading.percentage == 17.0
    assert reading.time_to_empty.total_seconds() == 1800


def test_read_leaves_type_to_read_type() -> None:
    bus = _FakeBus({BAT0: _FakeProxy(State=1, Percentage=64.0, TimeToEmpty=0)})
    props = UPowerDeviceReader(bus=bus).read(BAT0)
    assert props["charging_state_code"] == 1
    assert "device_type" not in props
