"""HTTP Monitor - Traffic statistics and high-traffic alerting"""

import logging
import threading
from collections import Counter, deque
from datetime import datetime
from typing import Deque, Dict, List, Optional, Tuple

from .models import LogRecord, MonitorSnapshot
from .patterns import DEFAULT_RATE_THRESHOLD, DEFAULT_TOP_N, DEFAULT_WINDOW_SECONDS, RESPONSE_CLASSES

logger = logging.getLogger(__name__)


class TrafficMonitor:
    """Cumulative traffic stats plus a sliding-window request rate alert.

    Records must arrive in non-decreasing timestamp order. Every public
    method holds the same lock for its whole duration, so a snapshot never
    sees a half-applied ingest.
    """

    def __init__(self, window_seconds: float = DEFAULT_WINDOW_SECONDS,
                 rate_threshold: float = DEFAULT_RATE_THRESHOLD):
        if window_seconds <= 0:
            raise ValueError(f"window must be > 0 seconds, got {window_seconds}")
        self.window_seconds = window_seconds
        self.rate_threshold = rate_threshold
        self.response_codes: Dict[str, int] = {k: 0 for k in RESPONSE_CLASSES}
        self.section_counts: Counter = Counter()
        self.window: Deque[datetime] = deque()
        self.alerting = False
        self.total = 0
        self._lock = threading.Lock()

    def ingest(self, record: LogRecord):
        with self._lock:
            self.total += 1
            self.response_codes[record.status_class] += 1
            self.section_counts[record.section] += 1
            self._update_window(record.timestamp)

    def _update_window(self, timestamp: datetime):
        self.window.append(timestamp)

        # An entry exactly window_seconds older than the newest one stays
        while self.window and self._span() > self.window_seconds:
            self.window.popleft()

        rate = self._rate()
        if rate is None:
            return
        alerting = rate > self.rate_threshold
        if alerting != self.alerting:
            logger.debug("Alert state %s -> %s at %.3f req/s",
                         self.alerting, alerting, rate)
        self.alerting = alerting

    def _span(self) -> float:
        if not self.window:
            return 0.0
        return (self.window[-1] - self.window[0]).total_seconds()

    def _rate(self) -> Optional[float]:
        # Empty or zero-span windows have no meaningful rate
        span = self._span()
        if span <= 0:
            return None
        return len(self.window) / span

    def _top_sections(self, n: int) -> List[Tuple[str, int]]:
        if n <= 0:
            return []
        ranked = sorted(self.section_counts.items(), key=lambda kv: (-kv[1], kv[0]))
        return ranked[:n]

    def response_code_counts(self) -> Dict[str, int]:
        with self._lock:
            return dict(self.response_codes)

    def top_sections(self, n: int = DEFAULT_TOP_N) -> List[Tuple[str, int]]:
        """Most requested sections, ties broken alphabetically"""
        with self._lock:
            return self._top_sections(n)

    def current_rate(self) -> Optional[float]:
        """Average requests per second over the window, None without data"""
        with self._lock:
            return self._rate()

    def is_alerting(self) -> bool:
        with self._lock:
            return self.alerting

    def snapshot(self, top_n: int = DEFAULT_TOP_N) -> MonitorSnapshot:
        with self._lock:
            return MonitorSnapshot(
                response_codes=dict(self.response_codes),
                top_sections=self._top_sections(top_n),
                rate=self._rate(),
                alerting=self.alerting,
                total=self.total,
                window_size=len(self.window),
            )
