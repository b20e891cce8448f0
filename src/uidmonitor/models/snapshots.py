"""
Cumulative counter snapshots.

A snapshot is a full read of the raw stats source: one UidSnapshot per uid,
each carrying the TaskSnapshots that were attached to it. Snapshots are
rebuilt on every sample and never mutated once the read is complete.
"""

from dataclasses import dataclass, field
from typing import Dict, List


@dataclass
class IoStats:
    """Cumulative counters for a single priority class."""

    rchar: int = 0
    wchar: int = 0
    read_bytes: int = 0
    write_bytes: int = 0
    fsync: int = 0


def _per_priority() -> List[IoStats]:
    # Indexed by Priority
    return [IoStats(), IoStats()]


@dataclass
class TaskSnapshot:
    """
    Cumulative counters of one task (thread group) at a point in time.

    Attributes:
        pid: Process ID reported by the kernel.
        comm: Command name; this is the aggregation key for task usage.
        io: Counters indexed by Priority.
    """

    pid: int = 0
    comm: str = ""
    io: List[IoStats] = field(default_factory=_per_priority)


@dataclass
class UidSnapshot:
    """
    Cumulative counters of one uid at a point in time.

    Attributes:
        uid: Numeric user id.
        name: Display name; the stringified uid until a name is resolved.
        io: Counters indexed by Priority.
        tasks: Task snapshots keyed by pid.
    """

    uid: int = 0
    name: str = ""
    io: List[IoStats] = field(default_factory=_per_priority)
    tasks: Dict[int, TaskSnapshot] = field(default_factory=dict)

    def __post_init__(self):
        if not self.name:
            self.name = str(self.uid)
