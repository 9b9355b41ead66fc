"""URL status check endpoints."""

from typing import Optional
from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from ..config import Settings
from ..dependencies import get_app_settings, get_status_service
from ..services.status import StatusService

router = APIRouter(tags=["check"])


class CheckManyRequest(BaseModel):
    """URLs to check in a single request."""
    urls: list[str] = Field(..., description="URLs or bare hostnames to check")


@router.get("/check")
async def check_url(
    url: Optional[str] = Query(None),
    service: StatusService = Depends(get_status_service),
):
    """Check one URL, answering from the cache while the result is fresh."""
    if not url:
        return JSONResponse(status_code=400, content={"error": "Missing url"})

    entry, cached = await service.check(url)
    return service.to_json(entry, cached)


@router.post("/check-multiple")
async def check_multiple(
    request: CheckManyRequest,
    service: StatusService = Depends(get_status_service),
    settings: Settings = Depends(get_app_settings),
):
    """Check several URLs one after another."""
    urls = [u for u in request.urls if u]
    if len(urls) > settings.batch_max:
        return JSONResponse(
            status_code=400,
            content={"error": f"Too many urls (max {settings.batch_max})"},
        )

    return await service.check_many(urls)
