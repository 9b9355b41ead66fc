"""Health check endpoint."""

import time
from fastapi import APIRouter

router = APIRouter(tags=["health"])


@router.get("/health")
async def health_check():
    """Liveness of this server with the current epoch time."""
    return {"ok": 1, "up": int(time.time())}
