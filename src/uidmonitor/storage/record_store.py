"""
Bounded, time-ordered store of flushed uid record buckets.

The store maps a flush timestamp to the bucket produced by that flush. It is
bounded two ways: buckets older than the retention window are pruned, and the
total number of records across all buckets is capped by evicting whole oldest
buckets.
"""

import bisect
import copy
import logging
from typing import Dict, List

from ..models.records import UidRecords

logger = logging.getLogger(__name__)

HOUR_TO_SEC = 3600
DAY_TO_SEC = 24 * HOUR_TO_SEC

# 1000 uids in 48 buckets
MAX_UID_RECORDS_SIZE = 1000 * 48
RECORD_RETENTION_SECONDS = 5 * DAY_TO_SEC


class RecordStore:
    """
    Ordered timestamp -> UidRecords mapping with age and size eviction.

    Not thread-safe; the owning monitor serializes access.
    """

    def __init__(
        self,
        max_records: int = MAX_UID_RECORDS_SIZE,
        retention_seconds: int = RECORD_RETENTION_SECONDS,
    ):
        self.max_records = max_records
        self.retention_seconds = retention_seconds
        self._keys: List[int] = []
        self._buckets: Dict[int, UidRecords] = {}

    def __len__(self) -> int:
        return len(self._keys)

    def records_size(self) -> int:
        """Total number of records across all buckets."""
        return sum(len(bucket.entries) for bucket in self._buckets.values())

    def prune_expired(self, now: int) -> int:
        """
        Remove buckets older than the retention window.

        Nothing is pruned until `now` exceeds the window itself.

        Returns:
            The number of buckets removed.
        """
        if now <= self.retention_seconds:
            return 0

        cutoff = now - self.retention_seconds
        index = bisect.bisect_left(self._keys, cutoff)
        for ts in self._keys[:index]:
            del self._buckets[ts]
        del self._keys[:index]

        if index:
            logger.debug(f"Pruned {index} buckets older than {cutoff}")
        return index

    def evict_oldest(self) -> int:
        """
        Remove the oldest bucket.

        Returns:
            The number of records it held.
        """
        ts = self._keys.pop(0)
        bucket = self._buckets.pop(ts)
        logger.debug(f"Evicted bucket {ts} with {len(bucket.entries)} records")
        return len(bucket.entries)

    def add(self, ts: int, bucket: UidRecords) -> bool:
        """
        Insert a non-empty bucket, evicting whole oldest buckets to make room.

        A bucket stored under the same timestamp is replaced.

        Returns:
            True if the bucket was stored.
        """
        if not bucket.entries:
            return False

        if len(bucket.entries) > self.max_records:
            logger.error(
                f"Bucket {ts} has {len(bucket.entries)} records, more than the "
                f"store limit of {self.max_records}; dropping it"
            )
            return False

        overflow = self.records_size() + len(bucket.entries) - self.max_records
        while overflow > 0 and self._keys:
            overflow -= self.evict_oldest()

        if ts not in self._buckets:
            bisect.insort(self._keys, ts)
        self._buckets[ts] = bucket
        return True

    def filtered(self, first_ts: int, threshold: int) -> Dict[int, UidRecords]:
        """
        Select buckets and records for a query.

        Args:
            first_ts: Buckets with a key below this are skipped.
            threshold: Records are kept only if their total bytes exceed it.

        Returns:
            Copies of the matching buckets in key order; buckets left with no
            records are omitted.
        """
        result: Dict[int, UidRecords] = {}
        index = bisect.bisect_left(self._keys, first_ts)
        for ts in self._keys[index:]:
            bucket = self._buckets[ts]
            entries = [
                copy.deepcopy(record)
                for record in bucket.entries
                if record.total_bytes > threshold
            ]
            if not entries:
                continue
            result[ts] = UidRecords(start_ts=bucket.start_ts, entries=entries)
        return result
