"""
API route registration
"""
from fastapi import APIRouter

from .v1 import events as events_v1
from .health import router as health_router

api_v1_router = APIRouter()

api_v1_router.include_router(
    health_router,
    prefix="/health",
    tags=["health-v1"],
    responses={
        200: {"description": "Success"},
        503: {"description": "Service Unavailable"}
    }
)

api_v1_router.include_router(
    events_v1.router,
    tags=["events-v1"],
    responses={
        200: {"description": "Success"},
        400: {"description": "Bad Request"},
        404: {"description": "Object Not Found"},
        422: {"description": "Unprocessable Image"},
        502: {"description": "Upstream Service Error"}
    }
)

__all__ = ["api_v1_router"]
