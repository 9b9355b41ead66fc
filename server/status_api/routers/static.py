"""Static documents and files served from the static root."""

import logging
from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse, Response

from ..config import Settings
from ..dependencies import get_app_settings
from ..services.static import (
    BadStaticPath,
    content_type_for,
    read_static_file,
    resolve_static_path,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["static"])


def serve_file(settings: Settings, requested: str) -> Response:
    try:
        path = resolve_static_path(settings.static_dir, requested, settings.max_static_path)
    except BadStaticPath:
        logger.info("Rejected static path %r", requested)
        return PlainTextResponse("Bad request", status_code=400)

    data = read_static_file(path)
    if data is None:
        return PlainTextResponse("Not found", status_code=404)

    return Response(
        content=data,
        media_type=content_type_for(path.name),
        headers={"Cache-Control": f"public, max-age={settings.static_max_age}"},
    )


@router.get("/")
async def serve_index(settings: Settings = Depends(get_app_settings)):
    """Serve the default document."""
    return serve_file(settings, settings.index_document)


@router.get("/services.json")
async def serve_services(settings: Settings = Depends(get_app_settings)):
    """Serve the services config document."""
    return serve_file(settings, settings.services_document)


@router.get("/{path:path}")
async def serve_static(path: str, settings: Settings = Depends(get_app_settings)):
    """Serve any other path as a file under the static root."""
    return serve_file(settings, path)
