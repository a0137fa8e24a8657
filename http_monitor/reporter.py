"""HTTP Monitor - Periodic stats reporter"""

import logging
import threading
from datetime import datetime
from typing import Optional

from rich.console import Console

from .models import MonitorSnapshot
from .monitor import TrafficMonitor
from .output import print_alert, print_recovery, print_snapshot
from .patterns import DEFAULT_REPORT_INTERVAL, DEFAULT_TOP_N

logger = logging.getLogger(__name__)


class Reporter:
    """Prints monitor snapshots and announces alert state changes.

    Alert transitions are detected by comparing each snapshot with the
    previous one, so a flip that reverts between two reports goes unseen.
    """

    def __init__(self, monitor: TrafficMonitor, console: Console,
                 interval: float = DEFAULT_REPORT_INTERVAL, top_n: int = DEFAULT_TOP_N):
        if interval <= 0:
            raise ValueError(f"report interval must be > 0 seconds, got {interval}")
        self.monitor = monitor
        self.console = console
        self.interval = interval
        self.top_n = top_n
        self.alerting = False
        self.failures = 0
        self._stop = threading.Event()
        self._thread: Optional[threading.Thread] = None

    def report_once(self) -> MonitorSnapshot:
        snapshot = self.monitor.snapshot(self.top_n)
        print_snapshot(snapshot, self.console)

        now = datetime.now()
        if snapshot.alerting and not self.alerting:
            logger.info("High-traffic alert raised")
            print_alert(snapshot.rate, now, self.console)
        elif self.alerting and not snapshot.alerting:
            logger.info("High-traffic alert cleared")
            print_recovery(now, self.console)
        self.alerting = snapshot.alerting
        return snapshot

    def _run(self):
        while not self._stop.is_set():
            try:
                self.report_once()
            except Exception:
                logger.exception("Stats report failed")
                self.failures += 1
            self._stop.wait(self.interval)

    def start(self):
        self._thread = threading.Thread(target=self._run, name="reporter", daemon=True)
        self._thread.start()

    def stop(self, timeout: Optional[float] = None):
        self._stop.set()
        if self._thread is not None:
            self._thread.join(timeout)
