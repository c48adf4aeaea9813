from fastapi import APIRouter, Depends
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession
import time

from ...core.database import get_async_db
from ...schemas.health import HealthStatus

router = APIRouter()

SERVICE_NAME = "certification-platform-api"


@router.get("/health", response_model=HealthStatus)
async def health_check(db: AsyncSession = Depends(get_async_db)):
    """Service status with a database round trip - no authentication required"""
    health_status = {
        "status": "healthy",
        "timestamp": time.time(),
        "service": SERVICE_NAME,
        "services": {}
    }

    try:
        await db.execute(text("SELECT 1"))
        health_status["services"]["database"] = "healthy"
    except Exception as e:
        health_status["services"]["database"] = f"error: {str(e)}"
        health_status["status"] = "unhealthy"

    return health_status
