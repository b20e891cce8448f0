"""
Raw stats source backed by the kernel's per-uid I/O accounting file.
"""

import logging
import os
from pathlib import Path
from typing import List, Union

from ..models.config import DEFAULT_UID_IO_STATS_PATH
from ..validation import StatsSourceError
from .base import AbstractStatsSource

logger = logging.getLogger(__name__)


class ProcUidIoSource(AbstractStatsSource):
    """
    Reads the whole of `/proc/uid_io/stats` (or another file in the same
    format) on every call.
    """

    def __init__(self, path: Union[str, Path] = DEFAULT_UID_IO_STATS_PATH):
        self.path = Path(path)
        logger.debug(f"Initialized ProcUidIoSource with path: {self.path}")

    def read_rows(self) -> List[str]:
        try:
            with open(self.path, "r", encoding="utf-8", errors="replace") as f:
                buffer = f.read()
        except OSError as e:
            raise StatsSourceError(f"{self.path}: read failed: {e}") from e

        return buffer.split("\n")

    def available(self) -> bool:
        return os.access(self.path, os.R_OK)
