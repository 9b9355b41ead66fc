"""Probe cache inspection endpoints."""

from fastapi import APIRouter, Depends

from ..dependencies import get_status_service
from ..services.status import StatusService

router = APIRouter(tags=["cache"])


@router.get("/cache")
async def get_cache(service: StatusService = Depends(get_status_service)):
    """List cached results with their age in seconds."""
    return service.snapshot()


@router.delete("/cache")
async def clear_cache(service: StatusService = Depends(get_status_service)):
    """Drop every cached result."""
    service.clear()
    return {"cleared": 1}
