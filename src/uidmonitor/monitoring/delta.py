"""
Snapshot differencing.

Turns two cumulative snapshots into one interval's usage. Only read_bytes and
write_bytes are charged; a counter that went backwards (reset or wraparound)
contributes nothing for that interval.
"""

import logging
from typing import Dict, List

from ..models.io_usage import ChargerState, IoType, IoUsage, Priority
from ..models.snapshots import IoStats, TaskSnapshot, UidSnapshot
from .accumulator import CurrentIntervalAccumulator

logger = logging.getLogger(__name__)

_ZERO_TASK = TaskSnapshot()


def clamped_delta(current: int, previous: int) -> int:
    delta = current - previous
    return delta if delta > 0 else 0


def compute_io_delta(
    current: List[IoStats], previous: List[IoStats], charger_state: ChargerState
) -> IoUsage:
    """
    Compute the usage between two per-priority counter sets.

    Args:
        current: Counters of the newer snapshot, indexed by Priority.
        previous: Counters of the older snapshot, indexed by Priority.
        charger_state: Charger cell the deltas are charged to.

    Returns:
        An IoUsage with at most the four cells of `charger_state` set.
    """
    usage = IoUsage()
    for priority in Priority:
        cur = current[priority]
        prev = previous[priority]
        usage.add(
            IoType.READ,
            priority,
            charger_state,
            clamped_delta(cur.read_bytes, prev.read_bytes),
        )
        usage.add(
            IoType.WRITE,
            priority,
            charger_state,
            clamped_delta(cur.write_bytes, prev.write_bytes),
        )
    return usage


def accumulate_deltas(
    previous: Dict[int, UidSnapshot],
    current: Dict[int, UidSnapshot],
    accumulator: CurrentIntervalAccumulator,
    charger_state: ChargerState,
) -> None:
    """
    Merge the usage between two snapshots into the accumulator.

    Every uid of `current` is diffed against the same uid in `previous`, or an
    all-zero baseline if it is new. Tasks are diffed by pid against the
    previous snapshot of the same uid and summed under their command name.
    """
    for uid, snapshot in current.items():
        last = previous.get(uid)
        last_io = last.io if last is not None else _ZERO_TASK.io
        last_tasks = last.tasks if last is not None else {}

        usage = accumulator.entry(snapshot.name)
        usage.uid_ios.merge(compute_io_delta(snapshot.io, last_io, charger_state))

        for pid, task in snapshot.tasks.items():
            last_task = last_tasks.get(pid, _ZERO_TASK)
            task_usage = usage.task_ios.get(task.comm)
            if task_usage is None:
                task_usage = IoUsage()
                usage.task_ios[task.comm] = task_usage
            task_usage.merge(compute_io_delta(task.io, last_task.io, charger_state))

    logger.debug(f"Accumulated deltas for {len(current)} uids ({charger_state.name})")
