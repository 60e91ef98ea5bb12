"""Health check endpoints for Employee Manager.

Both endpoints are unauthenticated and mounted at root (no /api/v1 prefix).
"""

import importlib.metadata
import logging

from fastapi import APIRouter
from fastapi.responses import JSONResponse
from sqlalchemy import text

from app.database import AsyncSessionLocal

log = logging.getLogger(__name__)

router = APIRouter(tags=["health"])


@router.get("/health")
async def health() -> dict[str, str]:
    """Liveness probe: returns 200 if the application process is running."""
    version = importlib.metadata.version("employee-manager")
    return {"status": "ok", "version": version}


@router.get("/health/ready")
async def health_ready() -> JSONResponse:
    """Readiness probe: returns 200 if the DB is reachable, 503 otherwise."""
    try:
        async with AsyncSessionLocal() as session:
            await session.execute(text("SELECT 1"))
    except Exception:  # noqa: BLE001
        log.exception("Readiness check failed")
        return JSONResponse(
            status_code=503,
            content={"status": "unavailable", "detail": "Database is unavailable"},
        )
    return JSONResponse(status_code=200, content={"status": "ok"})
