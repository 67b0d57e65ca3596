"""System API routes (health, logs)"""

from fastapi import APIRouter, HTTPException, Query

from .. import __version__
from ..config import settings as app_settings
from ..services.log_service import log_service

router = APIRouter(prefix="/api/system", tags=["system"])


@router.get("/health")
async def health_check():
    """Service status and whether TMDB is configured"""
    return {
        "status": "healthy",
        "version": __version__,
        "tmdb_configured": bool(app_settings.TMDB_API_KEY),
        "logs_dir": str(app_settings.LOGS_DIR),
    }


@router.get("/logs")
async def get_logs(
    type: str = Query("error", pattern="^(error|info)$"),
    limit: int = Query(100, ge=1, le=1000),
):
    """Get recent log entries"""
    try:
        logs = log_service.get_logs(type, limit)
    except OSError as e:
        raise HTTPException(status_code=500, detail=f"Failed to read logs: {e}")
    return {"log_type": type, "lines": logs, "count": len(logs)}
