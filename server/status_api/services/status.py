"""Cache-or-probe status lookups."""

import asyncio
from typing import Optional

from .cache import CacheEntry, ProbeCache
from .probe import ProbeExecutor


def bound_url(url: str, max_bytes: int) -> str:
    """Truncate ``url`` to at most ``max_bytes`` UTF-8 bytes on a character boundary."""
    raw = url.encode("utf-8")
    if len(raw) <= max_bytes:
        return url
    return raw[:max_bytes].decode("utf-8", errors="ignore")


class StatusService:
    """Answers status checks from the probe cache, probing on miss."""

    def __init__(self, cache: ProbeCache, executor: ProbeExecutor, max_url_bytes: int = 255):
        self.cache = cache
        self.executor = executor
        self.max_url_bytes = max_url_bytes
        self._inflight: dict[str, asyncio.Lock] = {}

    def to_json(self, entry: CacheEntry, cached: bool) -> dict:
        return {
            "url": entry.url,
            "online": entry.reachable,
            "code": entry.status_code,
            "time": entry.elapsed_ms,
            "cached": cached,
        }

    async def check(self, url: str) -> tuple[CacheEntry, bool]:
        """Get the status of ``url``; returns the entry and whether it came from the cache."""
        url = bound_url(url, self.max_url_bytes)
        hit = self.cache.get_fresh(url)
        if hit is not None:
            return hit, True

        lock = self._inflight.setdefault(url, asyncio.Lock())
        try:
            async with lock:
                # Another request may have finished the same probe while we waited
                hit = self.cache.get_fresh(url)
                if hit is not None:
                    return hit, True
                result = await self.executor.probe(url)
                entry = self.cache.upsert(url, result.reachable, result.status_code, result.elapsed_ms)
                return entry, False
        finally:
            if not lock.locked() and self._inflight.get(url) is lock:
                del self._inflight[url]

    async def check_many(self, urls: list[str]) -> dict:
        """Check each URL in turn and summarize the outcome."""
        results = []
        for url in urls:
            entry, cached = await self.check(url)
            results.append(self.to_json(entry, cached))

        online = sum(1 for r in results if r["online"])
        return {
            "results": results,
            "summary": {
                "total": len(results),
                "online": online,
                "offline": len(results) - online,
            },
        }

    def sweep(self, now: Optional[float] = None) -> int:
        return self.cache.sweep(now)

    def clear(self) -> int:
        return self.cache.clear()

    def snapshot(self) -> dict:
        """Current cache contents with per-entry age in seconds."""
        now = self.cache.now()
        entries = self.cache.entries()
        return {
            "size": len(entries),
            "ttl": self.cache.ttl,
            "entries": [
                {
                    "url": e.url,
                    "online": e.reachable,
                    "age": int(e.age(now)),
                }
                for e in entries
            ],
        }
