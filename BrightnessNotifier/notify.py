"""
Desktop notifications over the org.freedesktop.Notifications D-Bus interface.
"""
import logging

from .exceptions import NotificationError
from .logic import NOTIFICATION_ID, SUMMARY

logger = logging.getLogger(__name__)


APP_NAME = "brightness-notifier"

NAME = "org.freedesktop.Notifications"
INTERFACE = "org.freedesktop.Notifications"
OBJECT_PATH = "/org/freedesktop/Notifications"


class DesktopNotifier:
    """
    Shows a single notification that replaces itself on every call,
    because each one is sent with the same replaces_id.
    """

    def __init__(self, app_name: str = APP_NAME, notification_id: int = NOTIFICATION_ID, bus=None):
        self.app_name = app_name
        self.notification_id = notification_id
        self.bus = bus

    def show(self, body: str, icon: str, timeout_ms: int) -> int:
        """
        Sends the notification and returns the id the server assigned to it.
        A timeout of 0 or less is interpreted by the notification server.
        """
        try:
            import dbus
        except ImportError as e:
            raise NotificationError(f"dbus-python is not available ({e})")

        try:
            bus = self.bus if self.bus is not None else dbus.SessionBus()
            proxy = bus.get_object(NAME, OBJECT_PATH)
            notifications = dbus.Interface(proxy, dbus_interface=INTERFACE)
            returned_id = notifications.Notify(
                self.app_name,
                dbus.UInt32(self.notification_id),
                icon,
                SUMMARY,
                body,
                dbus.Array([], signature="s"),
                dbus.Dictionary({}, signature="sv"),
                dbus.Int32(timeout_ms),
            )
        except dbus.exceptions.DBusException as e:
            raise NotificationError(e.get_dbus_message() or str(e))

        logger.debug("Notification %d shown: %s (%s)", returned_id, body, icon)
        return int(returned_id)
