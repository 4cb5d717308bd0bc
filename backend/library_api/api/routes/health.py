"""Health Routes — is the library API up, and can it reach its database.

Invariants:
    - GET /api/health/ answers 200 with service name and version while the process runs
    - GET /api/health/ready answers 503 "not_ready" until a SELECT 1 succeeds
"""

import logging
from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from library_api.infrastructure import database

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/health", tags=["health"])

SERVICE_NAME = "library-api"
SERVICE_VERSION = "1.0.0"


@router.get("/", status_code=status.HTTP_200_OK)
async def health_check():
    """Service name and version; no database access."""
    return {
        "status": "healthy",
        "service": SERVICE_NAME,
        "version": SERVICE_VERSION,
    }


@router.get("/ready")
async def readiness_check():
    """Ready only when the catalog database answers."""
    manager = database.db_manager
    db_ok = await manager.health_check() if manager else False
    if not db_ok:
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={
                "status": "not_ready",
                "reason": "database_unavailable",
            },
        )
    return {"status": "ready", "checks": {"database": "healthy"}}
