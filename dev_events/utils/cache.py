"""Time-based cache for rendered pages.

Entries expire after a fixed number of seconds; writes to the event store do
not invalidate them, so a freshly created event can take up to one window to
show up on a cached page.
"""

from __future__ import annotations

import threading
import time
from typing import Any, Callable, Dict, Tuple


class TTLCache:
    """Thread-safe key/value cache with a single time-to-live."""

    def __init__(self, ttl_seconds: float, clock: Callable[[], float] = time.monotonic) -> None:
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        self._entries: Dict[str, Tuple[float, Any]] = {}
        self._lock = threading.Lock()

    def get_or_set(self, key: str, factory: Callable[[], Any]) -> Any:
        """Return the cached value for *key*, computing it with *factory* on a miss."""
        now = self._clock()
        with self._lock:
            entry = self._entries.get(key)
            if entry is not None and entry[0] > now:
                return entry[1]

        value = factory()
        if self.ttl_seconds > 0:
            with self._lock:
                self._entries[key] = (now + self.ttl_seconds, value)
        return value

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

__all__ = ["TTLCache"]
