"""
Running per-uid usage totals between flushes.
"""

import logging
from typing import Dict, List

from ..models.records import UidIoUsage, UidRecord

logger = logging.getLogger(__name__)


class CurrentIntervalAccumulator:
    """
    Usage accrued since the last flush, keyed by uid display name.

    Attributes:
        start_ts: Start of the current interval; becomes the start_ts of the
            bucket built at the next flush.
    """

    def __init__(self, start_ts: int = 0):
        self.start_ts = start_ts
        self._usage: Dict[str, UidIoUsage] = {}

    def entry(self, name: str) -> UidIoUsage:
        """Return the running total for a uid, creating it on first use."""
        usage = self._usage.get(name)
        if usage is None:
            usage = UidIoUsage()
            self._usage[name] = usage
        return usage

    def build_records(self) -> List[UidRecord]:
        """
        Build the records of a flush.

        Uids with all-zero usage are dropped, as are all-zero tasks of the
        uids that remain.
        """
        records: List[UidRecord] = []
        for name, usage in self._usage.items():
            if usage.uid_ios.is_zero():
                continue
            record = UidRecord(name=name)
            record.ios.uid_ios = usage.uid_ios
            for comm, task_usage in usage.task_ios.items():
                if not task_usage.is_zero():
                    record.ios.task_ios[comm] = task_usage
            records.append(record)
        return records

    def reset(self, start_ts: int) -> None:
        """Drop all running totals and start a new interval."""
        self._usage = {}
        self.start_ts = start_ts
