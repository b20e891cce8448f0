"""
Data models and structures for the uid I/O monitor.

Usage Models:
- The 8-cell IoUsage counter matrix and its index enums
- Per-uid interval usage accumulated between flushes

Snapshot Models:
- Cumulative per-uid and per-task counters read from the raw stats source

Record Models:
- Flushed uid records and the time buckets holding them

Configuration Models:
- Raw stats source, reporting and dump settings
"""

# Usage models
from .io_usage import ChargerState, IoType, IoUsage, Priority

# Snapshot models
from .snapshots import IoStats, TaskSnapshot, UidSnapshot

# Record models
from .records import UidIoUsage, UidRecord, UidRecords

# Configuration models
from .config import AppConfig, MonitorConfig, SourceConfig

__all__ = [
    # Usage
    "ChargerState",
    "IoType",
    "IoUsage",
    "Priority",
    # Snapshots
    "IoStats",
    "TaskSnapshot",
    "UidSnapshot",
    # Records
    "UidIoUsage",
    "UidRecord",
    "UidRecords",
    # Configuration
    "AppConfig",
    "MonitorConfig",
    "SourceConfig",
]
