"""API routers for the Navigator status server."""

from .health import router as health_router
from .check import router as check_router
from .cache import router as cache_router
from .static import router as static_router

__all__ = [
    "health_router",
    "check_router",
    "cache_router",
    "static_router",
]
