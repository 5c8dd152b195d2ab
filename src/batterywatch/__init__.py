"""Low-battery desktop notifier backed by UPower."""

__version__ = "0.1.0"
