"""
Pytest configuration and shared fixtures for the uidmonitor test suite.

This module provides common fixtures, test doubles for the monitor's external
collaborators, and helpers for building raw uid I/O rows.
"""

import shutil
import sys
import tempfile
from pathlib import Path
from typing import List, Optional, Union

import pytest

# Add src to Python path for testing
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from uidmonitor.collectors.base import AbstractNameResolver, AbstractStatsSource  # noqa: E402
from uidmonitor.validation import NameResolutionError, StatsSourceError  # noqa: E402


# ============================================================================
# Test Configuration
# ============================================================================


def pytest_configure(config):
    """Configure pytest with custom markers and settings."""
    config.addinivalue_line("markers", "unit: mark test as a unit test")
    config.addinivalue_line("markers", "integration: mark test as an integration test")


# ============================================================================
# Test Doubles
# ============================================================================


class ScriptedStatsSource(AbstractStatsSource):
    """
    Stats source that returns queued snapshots in order.

    Each queued item is either a list of rows or an exception to raise. Once
    the queue is exhausted the last item is repeated.
    """

    def __init__(self, *snapshots: Union[List[str], Exception]):
        self.snapshots = list(snapshots)
        self.reads = 0
        self.is_available = True

    def push(self, snapshot: Union[List[str], Exception]) -> None:
        self.snapshots.append(snapshot)

    def read_rows(self) -> List[str]:
        if not self.snapshots:
            raise StatsSourceError("no snapshot scripted")
        index = min(self.reads, len(self.snapshots) - 1)
        self.reads += 1
        item = self.snapshots[index]
        if isinstance(item, Exception):
            raise item
        return list(item)

    def available(self) -> bool:
        return self.is_available


class StubNameResolver(AbstractNameResolver):
    """Resolver backed by a dict; records every request."""

    def __init__(self, names: Optional[dict] = None, fail: bool = False):
        self.names = names or {}
        self.fail = fail
        self.requests: List[List[int]] = []

    def get_names_for_uids(self, uids: List[int]) -> List[str]:
        self.requests.append(list(uids))
        if self.fail:
            raise NameResolutionError("package service unavailable")
        return [self.names.get(uid, "") for uid in uids]


class FakeClock:
    """Controllable clock returning seconds since the epoch."""

    def __init__(self, now: float = 1_000_000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class RowBuilder:
    """Helpers for rendering rows in the kernel's uid I/O stats format."""

    @staticmethod
    def uid_row(
        uid: int,
        fg_read: int = 0,
        fg_write: int = 0,
        bg_read: int = 0,
        bg_write: int = 0,
        fg_rchar: int = 0,
        fg_wchar: int = 0,
        bg_rchar: int = 0,
        bg_wchar: int = 0,
        fg_fsync: int = 0,
        bg_fsync: int = 0,
    ) -> str:
        fields = [
            uid,
            fg_rchar, fg_wchar, fg_read, fg_write,
            bg_rchar, bg_wchar, bg_read, bg_write,
            fg_fsync, bg_fsync,
        ]
        return " ".join(str(f) for f in fields)

    @staticmethod
    def task_row(
        comm: str,
        pid: int,
        fg_read: int = 0,
        fg_write: int = 0,
        bg_read: int = 0,
        bg_write: int = 0,
    ) -> str:
        fields = [
            "task", comm, pid,
            0, 0, fg_read, fg_write,
            0, 0, bg_read, bg_write,
            0, 0,
        ]
        return ",".join(str(f) for f in fields)


# ============================================================================
# Core Fixtures
# ============================================================================


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    temp_path = tempfile.mkdtemp()
    yield Path(temp_path)
    shutil.rmtree(temp_path, ignore_errors=True)


@pytest.fixture
def rows():
    """Provide the raw row builder."""
    return RowBuilder


@pytest.fixture
def clock():
    """A fake clock starting well past the retention window."""
    return FakeClock()


@pytest.fixture
def resolver():
    """A name resolver that knows nothing."""
    return StubNameResolver()


@pytest.fixture
def make_source():
    """Factory for scripted stats sources."""
    return ScriptedStatsSource


@pytest.fixture
def sample_config_data():
    """Sample `[monitor]` configuration data for testing."""
    return {
        "source": {
            "type": "proc",
            "path": "/proc/uid_io/stats",
        },
        "reporting": {
            "interval_seconds": 600.0,
            "initial_charger_state": "on",
        },
        "dump": {
            "hours": 24.0,
            "threshold": 1024,
        },
        "general": {
            "log_level": "DEBUG",
        },
    }


@pytest.fixture
def config_file(temp_dir, sample_config_data):
    """Write a temporary config.toml for testing."""
    import toml

    config_path = temp_dir / "config.toml"
    with open(config_path, "w") as f:
        toml.dump({"monitor": sample_config_data}, f)
    return config_path


@pytest.fixture(autouse=True)
def clear_config_after_test():
    """Automatically clear configuration cache after each test."""
    original_config_path = Path(__file__).parent.parent / "conf" / "config.toml"

    yield

    from uidmonitor.config import clear_config_cache, set_config_path

    clear_config_cache()
    set_config_path(original_config_path)
