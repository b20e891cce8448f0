"""
uidmonitor: per-uid and per-task storage I/O accounting.

This package samples the cumulative per-uid and per-task read/write byte
counters exposed by the kernel, converts successive samples into interval
deltas split by foreground/background priority and charger state, and keeps a
bounded history of time buckets for filtered queries.

The package is organized into specialized modules:
- config: Configuration management and validation
- models: Data structures and type definitions
- validation: Input validation and error handling
- collectors: Raw stats sources, name resolvers and row parsing
- monitoring: Delta computation, accumulation and the UidMonitor facade
- storage: The bounded record store and a tabular view of dump results
- cli: Command-line interface

Usage:
    From command line:
        python -m uidmonitor.cli.main [options]

    Programmatically:
        from uidmonitor import UidMonitor, ProcUidIoSource, ChargerState
        monitor = UidMonitor(ProcUidIoSource())
        monitor.init(ChargerState.OFF)
        monitor.report()
        history = monitor.dump(hours=24, threshold=0)
"""

# Main interfaces
from .config import get_config, clear_config_cache, set_config_path
from .monitoring import PeriodicReporter, UidMonitor
from .cli import main_cli

# Collaborators
from .collectors import (
    AbstractNameResolver,
    AbstractStatsSource,
    NullNameResolver,
    PasswdNameResolver,
    ProcUidIoSource,
    PsutilUidIoSource,
    create_stats_source,
)

# Model classes for external use
from .models import (
    AppConfig,
    ChargerState,
    IoType,
    IoUsage,
    MonitorConfig,
    Priority,
    UidRecord,
    UidRecords,
    UidSnapshot,
)

# Storage
from .storage import RecordStore, records_to_dataframe

# Validation utilities
from .validation import (
    NameResolutionError,
    StatsSourceError,
    UidMonitorError,
    ValidationError,
)

__version__ = "1.0.0"

__all__ = [
    # Main interfaces
    "get_config",
    "clear_config_cache",
    "set_config_path",
    "PeriodicReporter",
    "UidMonitor",
    "main_cli",
    # Collaborators
    "AbstractNameResolver",
    "AbstractStatsSource",
    "NullNameResolver",
    "PasswdNameResolver",
    "ProcUidIoSource",
    "PsutilUidIoSource",
    "create_stats_source",
    # Models
    "AppConfig",
    "ChargerState",
    "IoType",
    "IoUsage",
    "MonitorConfig",
    "Priority",
    "UidRecord",
    "UidRecords",
    "UidSnapshot",
    # Storage
    "RecordStore",
    "records_to_dataframe",
    # Validation
    "NameResolutionError",
    "StatsSourceError",
    "UidMonitorError",
    "ValidationError",
]
