"""
API package - routes and middleware
"""
from api.v1.events import router as events_router_v1
from .health import router as health_router

__all__ = [
    "events_router_v1",
    "health_router"
]
