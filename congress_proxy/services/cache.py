"""In-process TTL cache for upstream Congress payloads."""

from __future__ import annotations

import threading
import time
from datetime import timedelta
from typing import Callable, Dict, Generic, Optional, Tuple, TypeVar, Union

V = TypeVar("V")

Seconds = Union[float, int, timedelta]


class TTLCache(Generic[V]):
    """Thread-safe key/value store where every entry expires at a fixed instant.

    Expired entries are removed lazily by the ``get`` that observes them; there
    is no background sweeper and no size bound. A single lock serialises every
    read and write, so a lookup that evicts is ordered with concurrent ``set``
    calls on the same key.

    ``get`` hands back the stored object itself, so values are expected to be
    immutable (tuples, frozen dataclasses); mutating a returned value would
    change what later readers see.
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self._clock = clock
        self._lock = threading.Lock()
        self._entries: Dict[str, Tuple[V, float]] = {}

    def get(self, key: str) -> Tuple[Optional[V], bool]:
        """Return ``(value, True)`` for a live entry, ``(None, False)`` otherwise."""

        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return None, False
            value, expires_at = entry
            if self._clock() >= expires_at:
                del self._entries[key]
                return None, False
            return value, True

    def set(self, key: str, value: V, ttl: Seconds) -> None:
        """Store ``value`` until ``ttl`` seconds from now, replacing any prior entry."""

        if isinstance(ttl, timedelta):
            ttl = ttl.total_seconds()
        with self._lock:
            self._entries[key] = (value, self._clock() + ttl)

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __contains__(self, key: object) -> bool:
        # Physical presence only; expiry is checked by ``get``.
        with self._lock:
            return key in self._entries
