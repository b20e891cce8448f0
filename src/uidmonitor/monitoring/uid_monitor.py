"""
Per-uid storage I/O monitor.

UidMonitor owns all mutable monitoring state: the last cumulative snapshot,
the running interval totals, the bucketed record history and the charger
state. Every public operation holds one exclusive lock for its whole duration,
so a periodic report() and a concurrent dump() never observe each other's
partial updates.

A report cycle reads a fresh snapshot, charges the difference against the
previous one to the current charger state, and flushes the running totals into
a new bucket of the record store.
"""

import logging
import threading
import time
from typing import Callable, Dict, Optional

from ..collectors.base import AbstractNameResolver, AbstractStatsSource
from ..collectors.name_resolver import NullNameResolver
from ..collectors.uid_io_parser import parse_uid_io_rows
from ..models.io_usage import ChargerState
from ..models.records import UidRecords
from ..models.snapshots import UidSnapshot
from ..storage.record_store import HOUR_TO_SEC, RecordStore
from ..validation import (
    ErrorSeverity,
    StatsSourceError,
    handle_error,
    validate_positive_float,
    validate_positive_integer,
)
from .accumulator import CurrentIntervalAccumulator
from .delta import accumulate_deltas

logger = logging.getLogger(__name__)


class UidMonitor:
    """
    Thread-safe facade over the delta engine, accumulator and record store.

    Args:
        source: Supplies the raw rows of each snapshot.
        name_resolver: Maps newly seen uids to display names.
        clock: Returns the current time in seconds since the epoch.
        record_store: Bucket history; a default-bounded store if omitted.
    """

    def __init__(
        self,
        source: AbstractStatsSource,
        name_resolver: Optional[AbstractNameResolver] = None,
        clock: Callable[[], float] = time.time,
        record_store: Optional[RecordStore] = None,
    ):
        self._lock = threading.Lock()
        self._source = source
        self._name_resolver = name_resolver or NullNameResolver()
        self._clock = clock

        self._last_uid_io_stats: Dict[int, UidSnapshot] = {}
        self._accumulator = CurrentIntervalAccumulator()
        self._records = record_store if record_store is not None else RecordStore()
        self._charger_state = ChargerState.OFF
        self._refresh_uid_names = False

    @property
    def charger_state(self) -> ChargerState:
        return self._charger_state

    def enabled(self) -> bool:
        """Whether the raw stats source can be read on this system."""
        return self._source.available()

    def _now(self) -> int:
        return int(self._clock())

    # --- Snapshot reading ---

    def _resolve_names_locked(self, snapshot: Dict[int, UidSnapshot]) -> None:
        unnamed = [s for s in snapshot.values() if s.name == str(s.uid)]
        if not unnamed:
            self._refresh_uid_names = False
            return

        uids = [s.uid for s in unnamed]
        try:
            names = self._name_resolver.get_names_for_uids(uids)
        except Exception as e:
            handle_error(
                error=e,
                context=f"resolving names for {len(uids)} uids",
                severity=ErrorSeverity.ERROR,
                reraise=False,
                logger=logger,
            )
            return

        if len(names) != len(uids):
            logger.error(
                f"Name resolver returned {len(names)} names for {len(uids)} uids; ignoring"
            )
            return

        for s, name in zip(unnamed, names):
            if name:
                s.name = name
        self._refresh_uid_names = False

    def _read_uid_io_stats_locked(self) -> Dict[int, UidSnapshot]:
        try:
            rows = self._source.read_rows()
        except StatsSourceError as e:
            handle_error(
                error=e,
                context="reading uid I/O stats",
                severity=ErrorSeverity.ERROR,
                reraise=False,
                logger=logger,
            )
            return {}

        snapshot = parse_uid_io_rows(rows)
        if not snapshot:
            logger.warning("Uid I/O stats source returned no uid rows")
            return snapshot

        for uid, s in snapshot.items():
            last = self._last_uid_io_stats.get(uid)
            if last is None:
                self._refresh_uid_names = True
            else:
                s.name = last.name

        if self._refresh_uid_names:
            self._resolve_names_locked(snapshot)

        return snapshot

    def get_uid_io_stats(self) -> Dict[int, UidSnapshot]:
        """
        Read a fresh cumulative snapshot without charging it.

        Returns:
            Uid snapshots keyed by uid; empty if the read failed.
        """
        with self._lock:
            return self._read_uid_io_stats_locked()

    # --- Accumulation and flushing ---

    def _update_curr_io_stats_locked(self) -> bool:
        snapshot = self._read_uid_io_stats_locked()
        if not snapshot:
            return False

        accumulate_deltas(
            self._last_uid_io_stats, snapshot, self._accumulator, self._charger_state
        )
        self._last_uid_io_stats = snapshot
        return True

    def _add_records_locked(self, curr_ts: int) -> None:
        self._records.prune_expired(curr_ts)

        new_records = UidRecords(
            start_ts=self._accumulator.start_ts,
            entries=self._accumulator.build_records(),
        )
        self._accumulator.reset(curr_ts)

        if not new_records.entries:
            logger.debug(f"No uid I/O usage between {new_records.start_ts} and {curr_ts}")
            return

        if self._records.add(curr_ts, new_records):
            logger.info(
                f"Stored {len(new_records.entries)} uid records at {curr_ts} "
                f"({self._records.records_size()} records in {len(self._records)} buckets)"
            )

    def _report_locked(self) -> bool:
        sampled = self._update_curr_io_stats_locked()
        self._add_records_locked(self._now())
        return sampled

    # --- Public operations ---

    def init(self, charger_state: ChargerState) -> bool:
        """
        Seed the monitor with its first snapshot.

        Args:
            charger_state: Charger state at startup.

        Returns:
            True if the seed snapshot was read.
        """
        with self._lock:
            self._charger_state = ChargerState(charger_state)
            self._accumulator.reset(self._now())
            self._last_uid_io_stats = self._read_uid_io_stats_locked()
            logger.info(
                f"Uid monitor initialized with {len(self._last_uid_io_stats)} uids, "
                f"charger {self._charger_state.name}"
            )
            return bool(self._last_uid_io_stats)

    def report(self) -> bool:
        """
        Run one sample and flush cycle.

        A failed sample still flushes what was accumulated before it.

        Returns:
            True if the sample was read and charged.
        """
        with self._lock:
            return self._report_locked()

    def dump(
        self, hours: float = 0, threshold: int = 0, force_report: bool = False
    ) -> Dict[int, UidRecords]:
        """
        Query the stored history.

        Args:
            hours: Only buckets flushed within this many hours; 0 for all.
            threshold: Only records with more than this many bytes.
            force_report: Run a report cycle first so in-flight usage is included.

        Returns:
            Buckets keyed by flush timestamp, in ascending order.

        Raises:
            ValidationError: If hours or threshold is negative.
        """
        hours = validate_positive_float(hours, min_value=0.0, field_name="hours")
        threshold = validate_positive_integer(threshold, min_value=0, field_name="threshold")

        with self._lock:
            if force_report:
                self._report_locked()

            first_ts = 0
            if hours != 0:
                first_ts = max(0, int(self._now() - hours * HOUR_TO_SEC))

            return self._records.filtered(first_ts, threshold)

    def set_charger_state(self, charger_state: ChargerState) -> None:
        """
        Switch the charger state usage is charged to.

        Usage up to now is charged to the old state first. No bucket is flushed.
        """
        with self._lock:
            if self._charger_state == charger_state:
                return

            self._update_curr_io_stats_locked()
            logger.info(
                f"Charger state changed: {self._charger_state.name} -> "
                f"{ChargerState(charger_state).name}"
            )
            self._charger_state = ChargerState(charger_state)
