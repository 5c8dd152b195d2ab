from enum import Enum


class Urgency(Enum):
    """Notification urgency levels.

    Values are the byte codes of the ``urgency`` hint defined by the
    freedesktop.org Desktop Notifications specification.
    """

    LOW = 0
    NORMAL = 1
    CRITICAL = 2


class NotificationTimeout(Enum):
    """Notification expiration behaviour.

    Values are the ``expire_timeout`` argument of ``Notify``: -1 lets the
    notification server pick its default, 0 keeps the notification until
    the user dismisses it.
    """

    DEFAULT = -1
    NEVER = 0
