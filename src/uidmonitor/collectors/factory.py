"""
Factory for creating raw stats sources.
"""

import logging
from pathlib import Path
from typing import Literal, Optional, Union

from ..models.config import DEFAULT_UID_IO_STATS_PATH, SourceConfig
from .base import AbstractStatsSource
from .proc_uid_io import ProcUidIoSource
from .psutil_source import PsutilUidIoSource

logger = logging.getLogger(__name__)


def create_stats_source(
    source_type: Literal["proc", "psutil"] = "proc",
    path: Optional[Union[str, Path]] = None,
) -> AbstractStatsSource:
    """
    Create a raw stats source based on the specified type.

    Args:
        source_type: Source type ('proc' or 'psutil')
        path: Stats file path (for 'proc' only)

    Returns:
        AbstractStatsSource instance

    Raises:
        ValueError: If an unsupported source type is specified
    """
    if source_type == "proc":
        stats_path = Path(path) if path is not None else DEFAULT_UID_IO_STATS_PATH
        logger.debug(f"Creating ProcUidIoSource for: {stats_path}")
        return ProcUidIoSource(stats_path)
    elif source_type == "psutil":
        logger.debug("Creating PsutilUidIoSource")
        return PsutilUidIoSource()
    else:
        raise ValueError(f"Unsupported stats source: {source_type}")


def create_stats_source_from_config(source_config: SourceConfig) -> AbstractStatsSource:
    """Create the source described by a `[monitor.source]` configuration."""
    return create_stats_source(source_config.type, source_config.path)
