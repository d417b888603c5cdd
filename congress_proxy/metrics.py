"""Thread-safe metrics collectors shared across the proxy."""

from __future__ import annotations

import threading


class AppMetrics:
    """Track upstream timings and cache effectiveness."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self.upstream_api_time = 0.0
        self.upstream_calls = 0
        self.cache_hits = 0
        self.cache_misses = 0

    def add_upstream_call(self, duration: float) -> None:
        with self._lock:
            self.upstream_api_time += duration
            self.upstream_calls += 1

    def record_cache_hit(self) -> None:
        with self._lock:
            self.cache_hits += 1

    def record_cache_miss(self) -> None:
        with self._lock:
            self.cache_misses += 1

    def snapshot(self) -> dict[str, float]:
        with self._lock:
            return {
                "upstream_api_time": self.upstream_api_time,
                "upstream_calls": self.upstream_calls,
                "cache_hits": self.cache_hits,
                "cache_misses": self.cache_misses,
            }


metrics = AppMetrics()
