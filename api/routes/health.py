"""Health check endpoints."""

from datetime import datetime, timezone
from typing import Dict, List

from fastapi import APIRouter
from pydantic import BaseModel

from connectors.erp_base import list_available_connectors
from core import __version__


router = APIRouter()


class HealthResponse(BaseModel):
    """Health check response."""
    status: str
    timestamp: str
    version: str
    connectors: List[str]


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Health check endpoint. Does not call the remote API."""
    return HealthResponse(
        status="healthy",
        timestamp=datetime.now(timezone.utc).isoformat(),
        version=__version__,
        connectors=list_available_connectors(),
    )


@router.get("/ready")
async def readiness_check() -> Dict[str, str]:
    """Readiness probe."""
    return {"status": "ready"}


@router.get("/live")
async def liveness_check() -> Dict[str, str]:
    """Liveness probe."""
    return {"status": "alive"}
