"""
Configuration validation utilities.

This module turns the raw `[monitor]` table of config.toml into a validated
MonitorConfig, applying defaults for anything left out.
"""

import logging
from pathlib import Path
from typing import Any, Dict

from ..models.config import DEFAULT_UID_IO_STATS_PATH, MonitorConfig, SourceConfig
from ..models.io_usage import ChargerState
from ..validation import (
    ValidationError,
    validate_enum_choice,
    validate_positive_float,
    validate_positive_integer,
)

logger = logging.getLogger(__name__)

SOURCE_TYPES = ["proc", "psutil"]
LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def validate_source_config(source_settings: Dict[str, Any]) -> SourceConfig:
    """
    Validate the `[monitor.source]` section.

    Raises:
        ValidationError: If validation fails
    """
    source_type = validate_enum_choice(
        source_settings.get("type", "proc"),
        choices=SOURCE_TYPES,
        field_name="monitor.source.type",
    )

    path_value = source_settings.get("path", str(DEFAULT_UID_IO_STATS_PATH))
    if not isinstance(path_value, str) or not path_value.strip():
        raise ValidationError(
            "monitor.source.path must be a non-empty string",
            field_name="monitor.source.path",
            value=path_value,
        )

    return SourceConfig(type=source_type, path=Path(path_value))


def validate_monitor_config(monitor_data: Dict[str, Any]) -> MonitorConfig:
    """
    Validate and create a MonitorConfig from raw configuration data.

    Args:
        monitor_data: Raw monitor configuration from TOML

    Returns:
        Validated MonitorConfig instance

    Raises:
        ValidationError: If validation fails
    """
    source_settings = monitor_data.get("source", {})
    reporting_settings = monitor_data.get("reporting", {})
    dump_settings = monitor_data.get("dump", {})
    general_settings = monitor_data.get("general", {})

    source = validate_source_config(source_settings)

    report_interval_seconds = validate_positive_float(
        reporting_settings.get("interval_seconds", 3600.0),
        min_value=1.0,
        max_value=86400.0,  # one day
        field_name="monitor.reporting.interval_seconds",
    )

    charger_value = validate_enum_choice(
        reporting_settings.get("initial_charger_state", "off"),
        choices=["off", "on"],
        field_name="monitor.reporting.initial_charger_state",
        case_sensitive=False,
    )
    initial_charger_state = ChargerState.from_string(charger_value)

    dump_hours = validate_positive_float(
        dump_settings.get("hours", 0.0),
        min_value=0.0,
        field_name="monitor.dump.hours",
    )

    dump_threshold = validate_positive_integer(
        dump_settings.get("threshold", 0),
        min_value=0,
        field_name="monitor.dump.threshold",
    )

    log_level = validate_enum_choice(
        general_settings.get("log_level", "INFO"),
        choices=LOG_LEVELS,
        field_name="monitor.general.log_level",
        case_sensitive=False,
    )

    config = MonitorConfig(
        source=source,
        report_interval_seconds=report_interval_seconds,
        initial_charger_state=initial_charger_state,
        dump_hours=dump_hours,
        dump_threshold=dump_threshold,
        log_level=log_level,
    )
    logger.debug(f"Validated monitor configuration: {config}")
    return config
