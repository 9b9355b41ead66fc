"""Services for the Navigator status server."""

from .cache import CacheEntry, ProbeCache
from .probe import ProbeExecutor, ProbeResult
from .status import StatusService

__all__ = ["CacheEntry", "ProbeCache", "ProbeExecutor", "ProbeResult", "StatusService"]
