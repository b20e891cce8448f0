"""
Raw stats source that synthesizes uid I/O rows from psutil process counters.

Hosts without the kernel's per-uid accounting file still expose per-process
I/O counters. This source groups live processes by real uid and renders the
totals in the same row format as the kernel file, so the rest of the pipeline
is unchanged.

Limitations:
- psutil has no foreground/background split; all I/O is reported as foreground.
- fsync counts are not available and are reported as 0.
- A uid's total only covers processes alive at sampling time, so it can drop
  when a process exits; the delta engine clamps such drops to zero.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, List

import psutil

from ..validation import StatsSourceError
from .base import AbstractStatsSource

logger = logging.getLogger(__name__)


@dataclass
class _Counters:
    rchar: int = 0
    wchar: int = 0
    read_bytes: int = 0
    write_bytes: int = 0


@dataclass
class _UidGroup:
    totals: _Counters = field(default_factory=_Counters)
    # (pid, comm, counters)
    tasks: List[tuple] = field(default_factory=list)


def _format_counters(c: _Counters) -> List[str]:
    fg = [c.rchar, c.wchar, c.read_bytes, c.write_bytes]
    bg = [0, 0, 0, 0]
    fsync = [0, 0]
    return [str(v) for v in fg + bg + fsync]


class PsutilUidIoSource(AbstractStatsSource):
    """
    Builds uid-summary and task-detail rows from `psutil.process_iter`.
    """

    def __init__(self):
        # This list tells psutil.process_iter which process attributes to pre-fetch.
        self._iter_attrs = ["pid", "name", "uids", "io_counters"]

    def available(self) -> bool:
        return hasattr(psutil.Process, "io_counters")

    def read_rows(self) -> List[str]:
        groups: Dict[int, _UidGroup] = {}
        processes_scanned = 0

        try:
            for proc in psutil.process_iter(self._iter_attrs):
                processes_scanned += 1
                info = proc.info
                io = info.get("io_counters")
                uids = info.get("uids")
                if io is None or uids is None:
                    # Access denied or the process vanished mid-scan
                    continue

                counters = _Counters(
                    rchar=getattr(io, "read_chars", 0),
                    wchar=getattr(io, "write_chars", 0),
                    read_bytes=io.read_bytes,
                    write_bytes=io.write_bytes,
                )
                # The row format is comma-delimited
                comm = (info.get("name") or "").replace(",", "_")

                group = groups.setdefault(uids.real, _UidGroup())
                group.totals.rchar += counters.rchar
                group.totals.wchar += counters.wchar
                group.totals.read_bytes += counters.read_bytes
                group.totals.write_bytes += counters.write_bytes
                group.tasks.append((info["pid"], comm, counters))
        except psutil.Error as e:
            raise StatsSourceError(f"psutil process scan failed: {e}") from e

        logger.debug(
            f"Scanned {processes_scanned} processes into {len(groups)} uid groups"
        )

        rows: List[str] = []
        for uid, group in groups.items():
            rows.append(" ".join([str(uid)] + _format_counters(group.totals)))
            for pid, comm, counters in group.tasks:
                rows.append(",".join(["task", comm, str(pid)] + _format_counters(counters)))
        return rows
