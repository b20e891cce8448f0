"""
Configuration data models.

This module contains the configuration data structures for the raw stats
source, periodic reporting, dump defaults and application configuration.
"""

from dataclasses import dataclass, field
from pathlib import Path

from .io_usage import ChargerState

DEFAULT_UID_IO_STATS_PATH = Path("/proc/uid_io/stats")


@dataclass
class SourceConfig:
    """
    Configuration for the raw stats source, loaded from `[monitor.source]`.
    """

    # "proc" reads the kernel file, "psutil" synthesizes rows from process counters.
    type: str = "proc"
    # Path of the kernel uid I/O stats file (only used by the "proc" source).
    path: Path = DEFAULT_UID_IO_STATS_PATH


@dataclass
class MonitorConfig:
    """
    Configuration for the monitor's global behavior, loaded from `config.toml`.
    """

    # [monitor.source]
    source: SourceConfig = field(default_factory=SourceConfig)

    # [monitor.reporting]
    report_interval_seconds: float = 3600.0
    initial_charger_state: ChargerState = ChargerState.OFF

    # [monitor.dump]
    dump_hours: float = 0.0
    dump_threshold: int = 0

    # [monitor.general]
    log_level: str = "INFO"


@dataclass
class AppConfig:
    """
    The root configuration object that aggregates all loaded settings.
    """

    monitor: MonitorConfig
