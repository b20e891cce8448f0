"""
Interval usage and flushed record models.

UidIoUsage is the mutable per-uid running total kept between flushes.
UidRecord and UidRecords are what a flush produces and what the record
store retains.
"""

from dataclasses import dataclass, field
from typing import Dict, List

from .io_usage import IoUsage


@dataclass
class UidIoUsage:
    """Usage accumulated for one uid since the last flush."""

    uid_ios: IoUsage = field(default_factory=IoUsage)
    # Keyed by task command name, not pid
    task_ios: Dict[str, IoUsage] = field(default_factory=dict)


@dataclass
class UidRecord:
    """
    One flushed, non-zero entry of a bucket.

    Attributes:
        name: Display name of the uid.
        ios: The uid's usage and its non-zero task usages.
    """

    name: str
    ios: UidIoUsage = field(default_factory=UidIoUsage)

    @property
    def total_bytes(self) -> int:
        return self.ios.uid_ios.total()


@dataclass
class UidRecords:
    """
    A time bucket: everything accrued between start_ts and the bucket's key.

    Attributes:
        start_ts: Start of the interval in seconds since the epoch.
        entries: Records in flush order.
    """

    start_ts: int = 0
    entries: List[UidRecord] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.entries)
