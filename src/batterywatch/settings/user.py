"""User-configurable settings loaded from config.yaml."""

from __future__ import annotations

import os
import re
from datetime import timedelta
from pathlib import Path
from typing import ClassVar

from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError, model_validator

from batterywatch import constants
from batterywatch.battery.classifier import SeverityPolicy

# Load environment variables from .env file(s)
load_dotenv()


def _interpolate_env(content: str) -> str:
    return re.sub(r"\$\{(\w+)\}", lambda m: os.getenv(m.group(1), ""), content)


class UserSettings(BaseModel):
    """User settings for the battery monitor. These values can be
    overridden by user settings in config.yaml.

    Defaults alert at 20% and 10%, renew low alerts every 10 minutes and
    critical alerts every 5 minutes, and poll every 10 seconds.
    """

    # Default search paths for configuration
    DEFAULT_CONFIG_PATHS: ClassVar[list[Path]] = [
        Path("config.yaml"),
        Path("~/.config/batterywatch/config.yaml").expanduser(),
        Path("/etc/batterywatch/config.yaml"),
    ]

    # Polling
    poll_seconds: float = Field(
        constants.POLL_INTERVAL.total_seconds(),
        gt=0,
        description="Seconds to sleep between battery samples",
    )

    # Thresholds
    low_threshold: float = Field(
        constants.LOW_THRESHOLD,
        gt=0,
        le=100,
        description="Battery % below which a low-battery alert is shown",
    )
    critical_threshold: float = Field(
        constants.CRITICAL_THRESHOLD,
        gt=0,
        le=100,
        description="Battery % below which a critical alert is shown",
    )

    # Renewal
    low_renewal_minutes: int = Field(
        10, gt=0, description="Minutes between repeated low-battery alerts"
    )
    critical_renewal_minutes: int = Field(
        5, gt=0, description="Minutes between repeated critical alerts"
    )

    # Notification content
    notification_summary: str = Field(
        constants.NOTIFICATION_SUMMARY, min_length=1, description="Notification title"
    )
    notification_icon: str = Field(
        constants.NOTIFICATION_ICON, description="Icon name from the desktop icon theme"
    )
    app_name: str = Field(
        constants.APP_NAME, min_length=1, description="Application name sent to the server"
    )

    # ---- validators ----
    @model_validator(mode="after")
    def check_thresholds_ordered(self) -> UserSettings:
        if self.critical_threshold >= self.low_threshold:
            raise ValueError("critical_threshold must be lower than low_threshold")
        return self

    # ---- convenience methods ----
    @property
    def poll_interval(self) -> timedelta:
        """Time to sleep between ticks."""
        return timedelta(seconds=self.poll_seconds)

    def policy(self) -> SeverityPolicy:
        """Build the classification policy from these settings.

        Returns:
            SeverityPolicy with the configured thresholds and renewals
        """
        return SeverityPolicy(
            low_threshold=self.low_threshold,
            critical_threshold=self.critical_threshold,
            low_renewal=timedelta(minutes=self.low_renewal_minutes),
            critical_renewal=timedelta(minutes=self.critical_renewal_minutes),
        )

    @classmethod
    def find_config(cls) -> Path | None:
        """Locate a configuration file.

        Returns:
            Path from BATTERYWATCH_CONFIG, else the first existing default
            path, else None

        Raises:
            FileNotFoundError: If BATTERYWATCH_CONFIG names a missing file
        """
        env_path = os.environ.get("BATTERYWATCH_CONFIG")
        if env_path:
            path = Path(env_path)
            if not path.exists():
                raise FileNotFoundError(f"Config file from BATTERYWATCH_CONFIG not found: {path}")
            return path

        for default_path in cls.DEFAULT_CONFIG_PATHS:
            if default_path.exists():
                return default_path
        return None

    @classmethod
    def load(cls, path: Path | None = None) -> UserSettings:
        """Load configuration from a YAML file.

        Without an explicit path the default locations are searched, and the
        built-in defaults are used when none of them exists.

        Args:
            path: Path to config file (optional)

        Returns:
            Validated UserSettings object

        Raises:
            FileNotFoundError: If BATTERYWATCH_CONFIG names a missing file
            RuntimeError: If the config file cannot be parsed or is invalid
        """
        if path is None:
            path = cls.find_config()
            if path is None:
                return cls()

        # Load and parse config
        import yaml  # local import to avoid hard dep for callers

        try:
            raw = _interpolate_env(path.read_text())
            data = yaml.safe_load(raw) or {}
        except Exception as exc:
            raise RuntimeError(f"Unable to read config YAML: {exc}") from exc

        try:
            return cls.model_validate(data)
        except ValidationError as err:
            raise RuntimeError(f"Invalid configuration:\n{err}") from err
