"""
Unit tests for BrightnessNotifier.notify module.

A fake dbus module is put in sys.modules, so no session bus is needed.
"""

import sys
import types
from unittest.mock import MagicMock, patch

import pytest

from BrightnessNotifier.exceptions import NotificationError
from BrightnessNotifier.notify import INTERFACE, NAME, OBJECT_PATH, DesktopNotifier


class FakeDBusException(Exception):
    def __init__(self, message, name="org.freedesktop.DBus.Error.ServiceUnknown"):
        super().__init__(message)
        self.message = message
        self.name = name

    def get_dbus_message(self):
        return self.message


@pytest.fixture
def fake_dbus():
    """Install a stand-in for the dbus module that records the Notify call."""
    notifications = MagicMock()
    notifications.Notify.return_value = 1
    bus = MagicMock()
    module = types.SimpleNamespace(
        exceptions=types.SimpleNamespace(DBusException=FakeDBusException),
        SessionBus=MagicMock(return_value=bus),
        Interface=MagicMock(return_value=notifications),
        UInt32=int,
        Int32=int,
        Array=lambda items, signature: list(items),
        Dictionary=lambda items, signature: dict(items),
        bus=bus,
        notifications=notifications,
    )
    with patch.dict(sys.modules, {"dbus": module}):
        yield module


# ============================================================================
# Tests for DesktopNotifier.show
# ============================================================================


def test_show_sends_notify(fake_dbus):
    """show should call Notify with the fixed summary and id."""
    assert DesktopNotifier().show("42% Brightness", "display-brightness-medium", 2000) == 1
    fake_dbus.bus.get_object.assert_called_once_with(NAME, OBJECT_PATH)
    fake_dbus.Interface.assert_called_once_with(fake_dbus.bus.get_object.return_value, dbus_interface=INTERFACE)
    fake_dbus.notifications.Notify.assert_called_once_with(
        "brightness-notifier",
        1,
        "display-brightness-medium",
        "Brightness",
        "42% Brightness",
        [],
        {},
        2000,
    )


def test_show_always_replaces_same_id(fake_dbus):
    """Every notification carries the same replaces_id."""
    notifier = DesktopNotifier()
    notifier.show("10% Brightness", "display-brightness-low", 2000)
    notifier.show("15% Brightness", "display-brightness-low", 2000)
    replaces_ids = [c[0][1] for c in fake_dbus.notifications.Notify.call_args_list]
    assert replaces_ids == [1, 1]


def test_show_negative_timeout(fake_dbus):
    DesktopNotifier().show("80% Brightness", "display-brightness-high", -1)
    assert fake_dbus.notifications.Notify.call_args[0][7] == -1


def test_show_uses_given_bus(fake_dbus):
    """A bus passed in is used instead of opening the session bus."""
    bus = MagicMock()
    DesktopNotifier(bus=bus).show("80% Brightness", "display-brightness-high", 2000)
    bus.get_object.assert_called_once_with(NAME, OBJECT_PATH)
    fake_dbus.SessionBus.assert_not_called()


def test_show_bus_failure(fake_dbus):
    """A D-Bus error should become a NotificationError with the detail."""
    fake_dbus.notifications.Notify.side_effect = FakeDBusException("The name is not activatable")
    with pytest.raises(NotificationError) as excinfo:
        DesktopNotifier().show("42% Brightness", "display-brightness-medium", 2000)
    assert str(excinfo.value) == "failed to display notification: The name is not activatable"


def test_show_no_session_bus(fake_dbus):
    fake_dbus.SessionBus.side_effect = FakeDBusException("Unable to autolaunch a dbus-daemon")
    with pytest.raises(NotificationError, match="Unable to autolaunch"):
        DesktopNotifier().show("42% Brightness", "display-brightness-medium", 2000)


def test_show_without_dbus_python():
    """A missing dbus module should be reported like any other notification failure."""
    with patch.dict(sys.modules, {"dbus": None}):
        with pytest.raises(NotificationError, match="failed to display notification: dbus-python is not available"):
            DesktopNotifier().show("42% Brightness", "display-brightness-medium", 2000)
