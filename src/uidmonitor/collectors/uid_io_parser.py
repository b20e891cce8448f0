"""
Row parsing for the uid I/O stats text format.

The raw source carries two row shapes:

    uid-summary:  "<uid> <fg rchar> <fg wchar> <fg read_bytes> <fg write_bytes>
                   <bg rchar> <bg wchar> <bg read_bytes> <bg write_bytes>
                   <fg fsync> <bg fsync>"
    task-detail:  "task,<comm>,<pid>,<same ten counters>"

A task row belongs to the uid row parsed most recently before it. Rows that
fail validation are logged and skipped; they never abort the read.
"""

import logging
from typing import Dict, Iterable, List, Optional

from ..models.io_usage import Priority
from ..models.snapshots import IoStats, TaskSnapshot, UidSnapshot

logger = logging.getLogger(__name__)

TASK_ROW_PREFIX = "task"
UID_ROW_MIN_FIELDS = 11
TASK_ROW_MIN_FIELDS = 13


def _parse_uint(value: str) -> int:
    # Plain ASCII digits only; int() alone would take "+5", "1_000" or " 7"
    if not (value.isascii() and value.isdigit()):
        raise ValueError(f"not an unsigned integer: {value!r}")
    return int(value)


def _parse_int(value: str) -> int:
    return -_parse_uint(value[1:]) if value.startswith("-") else _parse_uint(value)


def _fill_io(io: List[IoStats], counters: List[int]) -> None:
    fg = io[Priority.FOREGROUND]
    bg = io[Priority.BACKGROUND]
    fg.rchar, fg.wchar, fg.read_bytes, fg.write_bytes = counters[0:4]
    bg.rchar, bg.wchar, bg.read_bytes, bg.write_bytes = counters[4:8]
    fg.fsync = counters[8]
    bg.fsync = counters[9]


def parse_uid_row(line: str) -> Optional[UidSnapshot]:
    """
    Parse a uid-summary row.

    Returns:
        The parsed UidSnapshot, or None if the row is malformed.
    """
    fields = line.split()
    if len(fields) < UID_ROW_MIN_FIELDS:
        logger.warning(f"Invalid I/O stats: \"{line}\"")
        return None

    try:
        uid = _parse_uint(fields[0])
        counters = [_parse_uint(f) for f in fields[1:UID_ROW_MIN_FIELDS]]
    except ValueError:
        logger.warning(f"Invalid I/O stats: \"{line}\"")
        return None

    snapshot = UidSnapshot(uid=uid)
    _fill_io(snapshot.io, counters)
    return snapshot


def parse_task_row(line: str) -> Optional[TaskSnapshot]:
    """
    Parse a task-detail row.

    Returns:
        The parsed TaskSnapshot, or None if the row is malformed.
    """
    fields = line.split(",")
    if len(fields) < TASK_ROW_MIN_FIELDS:
        logger.warning(f"Invalid I/O stats: \"{line}\"")
        return None

    try:
        pid = _parse_int(fields[2])
        counters = [_parse_uint(f) for f in fields[3:TASK_ROW_MIN_FIELDS]]
    except ValueError:
        logger.warning(f"Invalid I/O stats: \"{line}\"")
        return None

    task = TaskSnapshot(pid=pid, comm=fields[1])
    _fill_io(task.io, counters)
    return task


def parse_uid_io_rows(rows: Iterable[str]) -> Dict[int, UidSnapshot]:
    """
    Build a snapshot from a sequence of raw rows.

    Task rows are attached to the most recently parsed uid row. A repeated
    uid row replaces the earlier entry for that uid. Task rows seen before any
    valid uid row have no owner and are dropped.

    Args:
        rows: Raw rows in source order.

    Returns:
        Uid snapshots keyed by uid, in first-seen order.
    """
    snapshots: Dict[int, UidSnapshot] = {}
    current: Optional[UidSnapshot] = None

    for line in rows:
        line = line.strip()
        if not line:
            continue

        if line.startswith(TASK_ROW_PREFIX):
            task = parse_task_row(line)
            if task is None:
                continue
            if current is None:
                logger.warning(f"Task row without a preceding uid row: \"{line}\"")
                continue
            current.tasks[task.pid] = task
        else:
            snapshot = parse_uid_row(line)
            if snapshot is None:
                continue
            snapshots[snapshot.uid] = snapshot
            current = snapshot

    return snapshots
