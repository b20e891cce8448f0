"""
Raw stats sources, name resolvers and row parsing.

This module provides the monitor's collaborators:
- Sources that return the rows of one cumulative uid I/O snapshot, either from
  the kernel's accounting file or synthesized from psutil process counters
- Resolvers that map uids to display names
- The parser that validates rows and assembles them into snapshots
"""

from .base import AbstractNameResolver, AbstractStatsSource
from .factory import create_stats_source, create_stats_source_from_config
from .name_resolver import NullNameResolver, PasswdNameResolver
from .proc_uid_io import ProcUidIoSource
from .psutil_source import PsutilUidIoSource
from .uid_io_parser import parse_task_row, parse_uid_io_rows, parse_uid_row

__all__ = [
    "AbstractNameResolver",
    "AbstractStatsSource",
    "create_stats_source",
    "create_stats_source_from_config",
    "NullNameResolver",
    "PasswdNameResolver",
    "ProcUidIoSource",
    "PsutilUidIoSource",
    "parse_task_row",
    "parse_uid_io_rows",
    "parse_uid_row",
]
