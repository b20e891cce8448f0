"""
Tabular view of dump results using Polars.

A dump result is a nested mapping of buckets, records and task usages. This
module flattens it into a DataFrame with one row per uid record and one row
per task of that record, which is convenient for display and ad hoc analysis.
Nothing is written to disk.
"""

import logging
from typing import Any, Dict, List, Optional

import polars as pl

from ..models.io_usage import ChargerState, IoType, IoUsage, Priority
from ..models.records import UidRecords

logger = logging.getLogger(__name__)

# (column, io type, priority, charger state)
USAGE_COLUMNS = [
    ("fg_read_on", IoType.READ, Priority.FOREGROUND, ChargerState.ON),
    ("fg_read_off", IoType.READ, Priority.FOREGROUND, ChargerState.OFF),
    ("bg_read_on", IoType.READ, Priority.BACKGROUND, ChargerState.ON),
    ("bg_read_off", IoType.READ, Priority.BACKGROUND, ChargerState.OFF),
    ("fg_write_on", IoType.WRITE, Priority.FOREGROUND, ChargerState.ON),
    ("fg_write_off", IoType.WRITE, Priority.FOREGROUND, ChargerState.OFF),
    ("bg_write_on", IoType.WRITE, Priority.BACKGROUND, ChargerState.ON),
    ("bg_write_off", IoType.WRITE, Priority.BACKGROUND, ChargerState.OFF),
]

DUMP_SCHEMA = {
    "bucket_ts": pl.Int64,
    "start_ts": pl.Int64,
    "name": pl.Utf8,
    "task": pl.Utf8,
    **{column: pl.UInt64 for column, _, _, _ in USAGE_COLUMNS},
    "total": pl.UInt64,
}


def _usage_row(
    bucket_ts: int, start_ts: int, name: str, task: Optional[str], usage: IoUsage
) -> Dict[str, Any]:
    row: Dict[str, Any] = {
        "bucket_ts": bucket_ts,
        "start_ts": start_ts,
        "name": name,
        "task": task,
    }
    for column, io_type, priority, charger in USAGE_COLUMNS:
        row[column] = usage.get(io_type, priority, charger)
    row["total"] = usage.total()
    return row


def records_to_dataframe(records: Dict[int, UidRecords]) -> pl.DataFrame:
    """
    Flatten a dump result into a Polars DataFrame.

    Args:
        records: Buckets keyed by flush timestamp, as returned by dump().

    Returns:
        DataFrame with the columns of DUMP_SCHEMA. Uid rows have a null
        `task`; each is followed by its task rows sorted by task name.
    """
    rows: List[Dict[str, Any]] = []
    for bucket_ts, bucket in records.items():
        for record in bucket.entries:
            rows.append(
                _usage_row(bucket_ts, bucket.start_ts, record.name, None, record.ios.uid_ios)
            )
            for comm in sorted(record.ios.task_ios):
                rows.append(
                    _usage_row(
                        bucket_ts,
                        bucket.start_ts,
                        record.name,
                        comm,
                        record.ios.task_ios[comm],
                    )
                )

    df = pl.DataFrame(rows, schema=DUMP_SCHEMA)
    logger.debug(f"Built dump table with {len(df)} rows from {len(records)} buckets")
    return df
