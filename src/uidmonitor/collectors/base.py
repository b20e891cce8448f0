"""
Defines the abstract interfaces of the monitor's external collaborators.

This module provides:
- AbstractStatsSource: supplies the raw text rows of one full snapshot of
  cumulative per-uid and per-task I/O counters.
- AbstractNameResolver: best-effort batch resolution of uids to display names.
"""

import logging
from abc import ABC, abstractmethod
from typing import List

logger = logging.getLogger(__name__)


class AbstractStatsSource(ABC):
    """
    Abstract base class for raw uid I/O stats sources.

    Every call to read_rows() must return a complete snapshot: one uid-summary
    row per uid, each followed by the task-detail rows belonging to it.
    """

    @abstractmethod
    def read_rows(self) -> List[str]:
        """
        Read one full snapshot.

        Returns:
            The snapshot's rows, in source order.

        Raises:
            StatsSourceError: If the source cannot be read.
        """
        pass

    @abstractmethod
    def available(self) -> bool:
        """
        Returns True if the source can be read on this system.
        """
        pass


class AbstractNameResolver(ABC):
    """
    Abstract base class for uid to display-name resolvers.
    """

    @abstractmethod
    def get_names_for_uids(self, uids: List[int]) -> List[str]:
        """
        Resolve a batch of uids.

        Args:
            uids: The uids to resolve.

        Returns:
            A list of the same length as `uids`; an empty string marks a uid
            that could not be resolved.

        Raises:
            NameResolutionError: If the lookup as a whole failed.
        """
        pass
