from __future__ import annotations

from typing import Any

import pytest

from batterywatch.battery.errors import NotifyError
from batterywatch.common.enums import NotificationTimeout, Urgency
from batterywatch.notify.freedesktop import FreedesktopNotificationDisplay
from batterywatch.system.protocols import NotificationDisplay


class _FakeNotifications:
    def __init__(self) -> None:
        self.calls: list[tuple[Any, ...]] = []

    def Notify(self, *args: Any) -> int:  # noqa: N802
        self.calls.append(args)
        return len(self.calls) + 100


class _FakeSessionBus:
    def __init__(self, service: Any) -> None:
        self.service = service

    def get(self, name: str) -> Any:
        if self.service is None:
            raise RuntimeError("GDBus.Error: name has no owner")
        return self.service


@pytest.fixture
def plain_variants(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(
        FreedesktopNotificationDisplay,
        "_variant",
        lambda self, signature, value: (signature, value),
    )


def test_display_satisfies_protocol() -> None:
    assert isinstance(FreedesktopNotificationDisplay(bus=object()), NotificationDisplay)


@pytest.mark.usefixtures("plain_variants")
def test_notify_arguments() -> None:
    server = _FakeNotifications()
    display = FreedesktopNotificationDisplay(app_name="bw", bus=_FakeSessionBus(server))

    display.show(
        "Low Battery", "battery", Urgency.CRITICAL, NotificationTimeout.NEVER, "Battery capacity is 5%"
    )

    assert server.calls == [
        (
            "bw",
            0,
            "battery",
            "Low Battery",
            "Battery capacity is 5%",
            [],
            {"urgency": ("y", 2)},
            0,
        )
    ]


@pytest.mark.usefixtures("plain_variants")
def test_renewal_replaces_previous_notification() -> None:
    server = _FakeNotifications()
    display = FreedesktopNotificationDisplay(bus=_FakeSessionBus(server))

    display.show("Low Battery", "battery", Urgency.NORMAL, NotificationTimeout.DEFAULT, "15%")
    display.show("Low Battery", "battery", Urgency.NORMAL, NotificationTimeout.DEFAULT, "14%")

    assert server.calls[0][1] == 0
    assert server.calls[1][1] == 101
    assert server.calls[1][7] == -1


@pytest.mark.usefixtures("plain_variants")
def test_missing_server_raises_notify_error() -> None:
    display = FreedesktopNotificationDisplay(bus=_FakeSessionBus(None))
    with pytest.raises(NotifyError):
        display.show("Low Battery", "battery", Urgency.NORMAL, NotificationTimeout.DEFAULT, "15%")
