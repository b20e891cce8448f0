"""
I/O usage counter matrix.

This module defines the index enums and the IoUsage container used to hold
interval byte counts split by direction, scheduling priority and charger state.
"""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import List


class IoType(IntEnum):
    """Direction of an I/O byte count."""
    READ = 0
    WRITE = 1


class Priority(IntEnum):
    """Scheduling priority class under which the I/O happened."""
    FOREGROUND = 0
    BACKGROUND = 1


class ChargerState(IntEnum):
    """Whether the device was on external power."""
    OFF = 0
    ON = 1

    @classmethod
    def from_string(cls, value: str) -> "ChargerState":
        """Parse 'on'/'off' (case-insensitive) into a ChargerState."""
        try:
            return cls[value.strip().upper()]
        except KeyError:
            raise ValueError(f"Invalid charger state: {value!r}") from None


def _empty_matrix() -> List[List[List[int]]]:
    return [[[0 for _ in ChargerState] for _ in Priority] for _ in IoType]


@dataclass
class IoUsage:
    """
    An 8-cell byte counter matrix indexed by
    [IoType][Priority][ChargerState].

    All cells are non-negative; callers only ever add clamped deltas.
    """

    bytes: List[List[List[int]]] = field(default_factory=_empty_matrix)

    def get(self, io_type: IoType, priority: Priority, charger: ChargerState) -> int:
        return self.bytes[io_type][priority][charger]

    def add(
        self, io_type: IoType, priority: Priority, charger: ChargerState, value: int
    ) -> None:
        """Add a byte count to a single cell."""
        self.bytes[io_type][priority][charger] += value

    def merge(self, other: "IoUsage") -> None:
        """Add every cell of another usage into this one."""
        for io_type in IoType:
            for priority in Priority:
                for charger in ChargerState:
                    self.bytes[io_type][priority][charger] += other.bytes[io_type][
                        priority
                    ][charger]

    def total(self) -> int:
        """Sum of all 8 cells."""
        return sum(
            self.bytes[io_type][priority][charger]
            for io_type in IoType
            for priority in Priority
            for charger in ChargerState
        )

    def is_zero(self) -> bool:
        for io_type in IoType:
            for priority in Priority:
                for charger in ChargerState:
                    if self.bytes[io_type][priority][charger]:
                        return False
        return True

    def copy(self) -> "IoUsage":
        usage = IoUsage()
        usage.merge(self)
        return usage
