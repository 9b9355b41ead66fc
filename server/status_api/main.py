"""Navigator status server FastAPI application entry point."""

import logging
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from . import __version__
from .config import Settings, get_settings
from .logging_setup import install_logging
from .routers import (
    health_router,
    check_router,
    cache_router,
    static_router,
)
from .services.cache import ProbeCache
from .services.probe import ProbeExecutor
from .services.status import StatusService

logger = logging.getLogger(__name__)


def build_status_service(settings: Settings) -> StatusService:
    """Create the cache and probe executor owned by one app instance."""
    cache = ProbeCache(ttl=settings.cache_ttl, capacity=settings.cache_max)
    executor = ProbeExecutor(
        connect_timeout=settings.probe_connect_timeout,
        timeout=settings.probe_timeout,
        verify_tls=settings.probe_verify_tls,
    )
    return StatusService(cache, executor, max_url_bytes=settings.max_url_bytes)


def create_app(
    settings: Optional[Settings] = None,
    status_service: Optional[StatusService] = None,
) -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = settings or get_settings()
    install_logging(settings.log_level, settings.log_file or None)

    app = FastAPI(
        title="Navigator Status",
        description="On-demand liveness checks for home-network services",
        version=__version__,
        docs_url="/api/docs",
        redoc_url=None,
    )
    app.state.settings = settings
    app.state.status_service = status_service or build_status_service(settings)

    @app.middleware("http")
    async def sweep_and_close(request: Request, call_next):
        """Sweep expired cache entries once per request; never keep connections alive."""
        request.app.state.status_service.sweep()
        try:
            response = await call_next(request)
        except Exception:
            logger.exception("Unhandled error for %s %s", request.method, request.url.path)
            response = PlainTextResponse("Internal server error", status_code=500)
        response.headers["Connection"] = "close"
        response.headers["X-Content-Type-Options"] = "nosniff"
        response.headers["X-Frame-Options"] = "DENY"
        return response

    @app.exception_handler(StarletteHTTPException)
    async def http_error(request: Request, exc: StarletteHTTPException):
        # Unknown paths and unsupported methods are both plain 404s
        if exc.status_code in (404, 405):
            return PlainTextResponse("Not found", status_code=404)
        return JSONResponse(status_code=exc.status_code, content={"error": exc.detail})

    @app.exception_handler(RequestValidationError)
    async def validation_error(request: Request, exc: RequestValidationError):
        return JSONResponse(status_code=400, content={"error": "Invalid request"})

    # Include routers with /api prefix
    app.include_router(health_router, prefix="/api")
    app.include_router(check_router, prefix="/api")
    app.include_router(cache_router, prefix="/api")

    # Static catch-all goes last
    app.include_router(static_router)

    return app


app = create_app()


def run():
    """Run the server."""
    settings = get_settings()
    print(f"Navigator status API listening on port {settings.port}")
    print(f"Health: http://localhost:{settings.port}/api/health")
    uvicorn.run(
        "status_api.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )


if __name__ == "__main__":
    run()
