"""TTL-based cache of probe results."""

import logging
import threading
import time
from typing import Callable, Optional
from dataclasses import dataclass

logger = logging.getLogger(__name__)


@dataclass
class CacheEntry:
    """Last probe result recorded for a URL."""
    url: str
    reachable: bool
    status_code: int
    elapsed_ms: int
    recorded_at: float  # epoch seconds, set at write time

    def age(self, now: float) -> float:
        return now - self.recorded_at


class ProbeCache:
    """Bounded in-memory cache keyed by exact URL string.

    Entries older than ``ttl`` seconds are stale: ``get_fresh`` ignores them
    and ``sweep`` removes them. When the cache is full, inserting a new URL
    evicts the entry with the oldest ``recorded_at``.
    """

    def __init__(self, ttl: int = 20, capacity: int = 100, clock: Callable[[], float] = time.time):
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self._ttl = ttl
        self._capacity = capacity
        self._clock = clock
        self._entries: dict[str, CacheEntry] = {}
        self._lock = threading.Lock()

    @property
    def ttl(self) -> int:
        return self._ttl

    @property
    def capacity(self) -> int:
        return self._capacity

    def __len__(self) -> int:
        return len(self._entries)

    def now(self) -> float:
        return self._clock()

    def find(self, url: str) -> Optional[CacheEntry]:
        """Get the entry for ``url`` regardless of age."""
        with self._lock:
            return self._entries.get(url)

    def get_fresh(self, url: str) -> Optional[CacheEntry]:
        """Get the entry for ``url`` if it is younger than the TTL."""
        with self._lock:
            entry = self._entries.get(url)
            if entry is None:
                return None
            if entry.age(self._clock()) >= self._ttl:
                return None
            return entry

    def upsert(self, url: str, reachable: bool, status_code: int, elapsed_ms: int) -> CacheEntry:
        """Insert or refresh the result for ``url``."""
        with self._lock:
            now = self._clock()
            entry = self._entries.get(url)
            if entry is not None:
                entry.reachable = reachable
                entry.status_code = status_code
                entry.elapsed_ms = elapsed_ms
                entry.recorded_at = now
                return entry

            if len(self._entries) >= self._capacity:
                oldest = min(self._entries.values(), key=lambda e: e.recorded_at)
                del self._entries[oldest.url]
                logger.debug("Cache full (%d), evicted %s", self._capacity, oldest.url)

            entry = CacheEntry(
                url=url,
                reachable=reachable,
                status_code=status_code,
                elapsed_ms=elapsed_ms,
                recorded_at=now,
            )
            self._entries[url] = entry
            return entry

    def sweep(self, now: Optional[float] = None) -> int:
        """Remove every entry older than the TTL. Returns the number removed."""
        with self._lock:
            if now is None:
                now = self._clock()
            expired = [url for url, e in self._entries.items() if e.age(now) > self._ttl]
            for url in expired:
                del self._entries[url]
        if expired:
            logger.debug("Swept %d expired cache entries", len(expired))
        return len(expired)

    def clear(self) -> int:
        """Clear all cache entries. Returns the number removed."""
        with self._lock:
            count = len(self._entries)
            self._entries = {}
        return count

    def entries(self) -> list[CacheEntry]:
        """Snapshot of current entries in insertion order."""
        with self._lock:
            return list(self._entries.values())
