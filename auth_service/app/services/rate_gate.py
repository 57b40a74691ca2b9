"""
Per-client request gate.

Admits at most one request per key per interval. This is an inter-arrival
check, not a token bucket: every call records its own arrival, including
denied ones.
"""

import threading
import time
from typing import Callable, Dict, Hashable


class RateGate:
    """
    Fixed one-request-per-interval gate keyed by client.

    A single instance is created per application and shared by every request
    that needs throttling. State lives in memory for the process lifetime.

    Entries idle for longer than ``stale_after_seconds`` are swept inside the
    same critical section, at most once per ``stale_after_seconds``. Because
    ``stale_after_seconds`` is never below the interval, a swept key would
    have been admitted anyway.
    """

    def __init__(
        self,
        interval_seconds: float = 1.0,
        stale_after_seconds: float = 60.0,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.interval = interval_seconds
        self.stale_after = max(stale_after_seconds, interval_seconds)
        self._clock = clock
        self._lock = threading.Lock()
        self._last_access: Dict[Hashable, float] = {}
        self._last_sweep = clock()

    def allow(self, key: Hashable) -> bool:
        """Record an arrival for ``key``; False if the previous one was under an interval ago."""
        with self._lock:
            now = self._clock()
            previous = self._last_access.get(key)
            self._last_access[key] = now

            if now - self._last_sweep >= self.stale_after:
                self._sweep(now)

        return previous is None or now - previous >= self.interval

    def _sweep(self, now: float) -> None:
        cutoff = now - self.stale_after
        stale = [key for key, seen in self._last_access.items() if seen < cutoff]
        for key in stale:
            del self._last_access[key]
        self._last_sweep = now

    def __len__(self) -> int:
        with self._lock:
            return len(self._last_access)
