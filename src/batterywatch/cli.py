"""Battery watcher CLI application.

This module provides the command-line interface for the low-battery
monitor: the monitor daemon itself, a one-shot status report, and
configuration utilities.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Final

import typer
import yaml

from batterywatch.battery.classifier import classify
from batterywatch.battery.errors import BatteryWatchError
from batterywatch.battery.sampler import Sampler
from batterywatch.monitor import BatteryMonitor
from batterywatch.notify.freedesktop import FreedesktopNotificationDisplay
from batterywatch.notify.notifier import Notifier
from batterywatch.settings import UserSettings
from batterywatch.system.upower import UPowerDeviceReader
from batterywatch.utils.formatting import format_percentage, format_remaining

# ── CLI setup ────────────────────────────────────────────────────────────────
app = typer.Typer(help="Low battery notifier", add_completion=False)
config_app = typer.Typer(help="Config helpers")
app.add_typer(config_app, name="config")

logger: Final = logging.getLogger(__name__)  # Will be "batterywatch.cli"

# Options shared by commands
CONFIG_OPTION = typer.Option(None, "--config", "-c", exists=True, dir_okay=False)
DEBUG_OPTION = typer.Option(False, "--debug", help="Enable debug logging")
ONCE_OPTION = typer.Option(False, "--once", "-1", help="Run one tick then exit")
DST_ARGUMENT = typer.Argument(..., help="Output config.yaml")
FORCE_OPTION = typer.Option(False, "--force", "-f", help="Overwrite an existing file")


def _configure_logging(debug: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(message)s",
    )


def _load_settings(config: Path | None) -> UserSettings:
    try:
        return UserSettings.load(config)
    except (FileNotFoundError, RuntimeError) as exc:
        typer.secho(str(exc), fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from exc


def build_monitor(settings: UserSettings) -> BatteryMonitor:
    """Wire the production adapters into a monitor.

    Args:
        settings: Validated user settings

    Returns:
        A monitor reading UPower and notifying through the session bus
    """
    sampler = Sampler(UPowerDeviceReader())
    notifier = Notifier(
        FreedesktopNotificationDisplay(app_name=settings.app_name),
        summary=settings.notification_summary,
        icon=settings.notification_icon,
    )
    return BatteryMonitor(
        sampler,
        notifier,
        policy=settings.policy(),
        poll_interval=settings.poll_interval,
    )


@app.command()
def run(
    config: Path | None = CONFIG_OPTION,
    once: bool = ONCE_OPTION,
    debug: bool = DEBUG_OPTION,
) -> None:
    """Monitor batteries and notify when charge is low."""
    _configure_logging(debug)
    settings = _load_settings(config)
    monitor = build_monitor(settings)

    try:
        monitor.run(max_ticks=1 if once else None)
    except BatteryWatchError as err:
        logger.error("Battery monitor stopped: %s", err.message)
        raise typer.Exit(code=1) from err
    except KeyboardInterrupt:
        logger.info("Interrupted, exiting")


@app.command()
def status(
    config: Path | None = CONFIG_OPTION,
    debug: bool = DEBUG_OPTION,
) -> None:
    """Print every battery and the resulting alert level."""
    _configure_logging(debug)
    settings = _load_settings(config)
    sampler = Sampler(UPowerDeviceReader())

    try:
        readings = sampler.sample()
    except BatteryWatchError as err:
        typer.secho(f"Cannot read batteries: {err.message}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from err

    if not readings:
        typer.echo("No batteries found")

    for reading in readings:
        line = (
            f"{reading.device}: {format_percentage(reading.percentage)} "
            f"{reading.charging_state.name.replace('_', ' ').lower()}"
        )
        if reading.has_time_to_empty:
            line += f" (remaining: {format_remaining(reading.time_to_empty)})"
        typer.echo(line)

    typer.echo(f"Level: {classify(readings, settings.policy()).name}")


# ───────────────────────── config sub-commands ───────────────────────────────
@config_app.command("validate")
def validate_config(file: Path):
    """Validate a YAML config file against the schema."""
    try:
        UserSettings.load(file)
        typer.echo("✅ Config valid")
    except (FileNotFoundError, RuntimeError) as exc:
        typer.secho(str(exc), fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from exc


@config_app.command("init")
def init_config(dst: Path = DST_ARGUMENT, force: bool = FORCE_OPTION):
    """Write a config file holding the default settings."""
    if dst.exists() and not force:
        typer.secho(f"{dst} already exists (use --force)", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    cfg = UserSettings()
    dst.write_text(yaml.safe_dump(cfg.model_dump(), sort_keys=False), encoding="utf-8")
    typer.secho(f"Config written to {dst}", fg=typer.colors.GREEN)


# ───────────────────────── module entrypoint ────────────────────────────────
if __name__ == "__main__":
    try:
        app()
    except KeyboardInterrupt:
        sys.exit(0)
