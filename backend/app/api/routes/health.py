"""Health endpoints — liveness and database readiness.

Invariants:
    - GET /api/v1/health/ answers 200 while the process runs
    - GET /api/v1/health/ready answers 503 until a manager exists and SELECT 1 succeeds
"""

import logging
from fastapi import APIRouter
from fastapi.responses import JSONResponse

import app.infrastructure.database as db_module

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/health", tags=["health"])


@router.get("/")
async def liveness():
    return {"status": "healthy"}


@router.get("/ready")
async def readiness():
    manager = db_module.db_manager
    if manager is not None and await manager.health_check():
        return {"status": "ready"}
    logger.warning("Readiness check failed: database unavailable")
    return JSONResponse(status_code=503, content={"status": "unavailable"})
