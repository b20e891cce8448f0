"""
Storage for flushed uid I/O records.

This module provides:
- RecordStore: the in-memory, time-ordered bucket history with retention
  and size-based eviction
- records_to_dataframe: a Polars table view of dump results for display
"""

from .frames import DUMP_SCHEMA, records_to_dataframe
from .record_store import (
    DAY_TO_SEC,
    HOUR_TO_SEC,
    MAX_UID_RECORDS_SIZE,
    RECORD_RETENTION_SECONDS,
    RecordStore,
)

__all__ = [
    "DUMP_SCHEMA",
    "records_to_dataframe",
    "DAY_TO_SEC",
    "HOUR_TO_SEC",
    "MAX_UID_RECORDS_SIZE",
    "RECORD_RETENTION_SECONDS",
    "RecordStore",
]
