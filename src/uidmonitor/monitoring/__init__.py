"""
Uid I/O monitoring: delta computation, interval accumulation and the
thread-safe monitor facade with its periodic trigger.
"""

from .accumulator import CurrentIntervalAccumulator
from .delta import accumulate_deltas, clamped_delta, compute_io_delta
from .scheduler import PeriodicReporter
from .uid_monitor import UidMonitor

__all__ = [
    "CurrentIntervalAccumulator",
    "accumulate_deltas",
    "clamped_delta",
    "compute_io_delta",
    "PeriodicReporter",
    "UidMonitor",
]
