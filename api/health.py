"""
Health check API routes
"""
from fastapi import APIRouter, HTTPException, Request
from typing import Dict, Any
import time

from configs.settings import settings
from utils.logger import get_logger
from models.response import HealthResponse
from utils.time_utils import now

logger = get_logger(__name__)
router = APIRouter()

@router.get("", response_model=HealthResponse)
async def health_check():
    """Basic health check"""
    return {
        "status": "healthy", 
        "service": settings.app_name,
        "version": settings.app_version,
        "timestamp": now().isoformat()
    }

@router.get("/detailed")
async def detailed_health_check(req: Request):
    """Detailed health check"""
    start_time = time.time()
    health_details = {
        "status": "healthy",
        "service": settings.app_name,
        "version": settings.app_version,
        "timestamp": now().isoformat(),
        "checks": {}
    }
    
    try:
        health_details["checks"]["pipeline"] = await _check_pipeline_health(req)
        
        all_healthy = all(
            check.get("status") == "healthy" 
            for check in health_details["checks"].values()
        )
        if not all_healthy:
            health_details["status"] = "degraded"
        
        health_details["response_time_ms"] = round((time.time() - start_time) * 1000, 2)
        return health_details
        
    except Exception as e:
        logger.error("Detailed health check failed", error=e)
        return {
            "status": "unhealthy",
            "service": settings.app_name,
            "version": settings.app_version,
            "timestamp": now().isoformat(),
            "error": str(e),
            "response_time_ms": round((time.time() - start_time) * 1000, 2)
        }

@router.get("/readiness")
async def readiness_check(req: Request):
    """Readiness check - for K8s readiness probe"""
    pipeline = getattr(req.app.state, "pipeline", None)
    ready = pipeline is not None and (await pipeline.get_status())["initialized"]
    
    if not ready:
        logger.warning("Readiness check failed", pipeline_present=pipeline is not None)
        raise HTTPException(
            status_code=503,
            detail={
                "status": "not_ready",
                "service": settings.app_name,
                "checks": {"pipeline": False}
            }
        )
    
    return {
        "status": "ready",
        "service": settings.app_name,
        "checks": {"pipeline": True}
    }

@router.get("/liveness")
async def liveness_check():
    """Liveness check - for K8s liveness probe"""
    return {
        "status": "alive",
        "service": settings.app_name,
        "timestamp": now().isoformat(),
        "uptime_check": "ok"
    }

async def _check_pipeline_health(req: Request) -> Dict[str, Any]:
    """Check pipeline health status"""
    pipeline = getattr(req.app.state, "pipeline", None)
    if pipeline is None:
        return {
            "status": "unhealthy",
            "error": "Pipeline not initialized"
        }
    
    try:
        return {
            "status": "healthy",
            "details": await pipeline.get_status()
        }
    except Exception as e:
        return {
            "status": "unhealthy",
            "error": str(e)
        }
