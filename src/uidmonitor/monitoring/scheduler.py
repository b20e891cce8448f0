"""
Periodic report trigger.

Runs UidMonitor.report() on a background thread at a fixed interval until
stopped. A failing cycle is logged and the loop continues.
"""

import logging
import threading
from typing import Optional

from .uid_monitor import UidMonitor

logger = logging.getLogger(__name__)


class PeriodicReporter:
    """
    Drives report cycles of a UidMonitor from a daemon thread.

    Attributes:
        cycles_completed: Number of cycles run, successful or not.
        cycles_failed: Number of cycles whose sample could not be read.
    """

    def __init__(
        self,
        monitor: UidMonitor,
        interval_seconds: float,
        thread_name: str = "UidMonitorReporter",
    ):
        if interval_seconds <= 0:
            raise ValueError(f"interval_seconds must be > 0, got {interval_seconds}")

        self.monitor = monitor
        self.interval_seconds = interval_seconds
        self.thread_name = thread_name

        self.cycles_completed = 0
        self.cycles_failed = 0

        self._stop_event = threading.Event()
        self._thread: Optional[threading.Thread] = None

    @property
    def is_running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def run_once(self) -> bool:
        """Run a single report cycle, absorbing any error."""
        try:
            ok = self.monitor.report()
        except Exception as e:
            logger.error(f"Report cycle failed: {e}", exc_info=True)
            ok = False

        self.cycles_completed += 1
        if not ok:
            self.cycles_failed += 1
        return ok

    def _run(self) -> None:
        logger.info(f"Periodic reporter started (interval: {self.interval_seconds}s)")
        while not self._stop_event.wait(self.interval_seconds):
            self.run_once()
        logger.info(
            f"Periodic reporter stopped after {self.cycles_completed} cycles "
            f"({self.cycles_failed} failed)"
        )

    def start(self) -> None:
        if self.is_running:
            logger.warning("Periodic reporter is already running")
            return

        self._stop_event.clear()
        self._thread = threading.Thread(
            target=self._run, name=self.thread_name, daemon=True
        )
        self._thread.start()

    def stop(self, timeout: float = 5.0) -> bool:
        """
        Stop the reporter thread.

        Returns:
            True if the thread has exited.
        """
        self._stop_event.set()
        if self._thread is None:
            return True

        self._thread.join(timeout)
        if self._thread.is_alive():
            logger.warning(f"Periodic reporter did not stop within {timeout}s")
            return False

        self._thread = None
        return True
