from datetime import timedelta

# UPower device type identifying batteries
DEVICE_TYPE_BATTERY = 2

# D-Bus names
UPOWER_SERVICE = "org.freedesktop.UPower"
UPOWER_PATH = "/org/freedesktop/UPower"
NOTIFICATIONS_SERVICE = ".Notifications"

# Charge thresholds (percent)
LOW_THRESHOLD = 20.0
CRITICAL_THRESHOLD = 10.0

# Minimum time between repeated alerts at an unchanged level
LOW_RENEWAL_INTERVAL: timedelta = timedelta(minutes=10)
CRITICAL_RENEWAL_INTERVAL: timedelta = timedelta(minutes=5)

# Time between ticks of the monitor loop
POLL_INTERVAL: timedelta = timedelta(seconds=10)

# Notification defaults
NOTIFICATION_SUMMARY = "Low Battery"
NOTIFICATION_ICON = "battery"
APP_NAME = "batterywatch"
