"""
Single-slot handoff of face ratios from the analysis thread (latest sample wins).
"""
import threading
import time
from typing import Optional

from domain.models import validate_unit


class LatestRatioSlot:
    """
    Holds at most one pending face ratio.

    The analysis thread calls put(); the consumer calls take(). A ratio that
    is replaced before being taken is counted as dropped and never delivered.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._ratio: Optional[float] = None
        self._timestamp: Optional[float] = None
        self.dropped = 0
        self.delivered = 0

    def put(self, ratio: float):
        """Store a new ratio, replacing any pending one."""
        value = validate_unit(ratio, "ratio")
        with self._lock:
            if self._ratio is not None:
                self.dropped += 1
            self._ratio = value
            self._timestamp = time.time()

    def take(self) -> Optional[float]:
        """Return and clear the pending ratio, or None if nothing is pending."""
        with self._lock:
            value = self._ratio
            self._ratio = None
            self._timestamp = None
            if value is not None:
                self.delivered += 1
            return value

    def has_pending(self) -> bool:
        with self._lock:
            return self._ratio is not None

    def age(self) -> Optional[float]:
        """Seconds since the pending ratio was stored."""
        with self._lock:
            if self._timestamp is None:
                return None
            return time.time() - self._timestamp
