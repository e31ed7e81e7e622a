"""
Webhook server - runs the face distortion pipeline outside Lambda
"""
import uvicorn
from fastapi import FastAPI
from contextlib import asynccontextmanager
from typing import Optional

from api.routes import api_v1_router
from api.middleware.error_handler import add_error_handlers
from api.middleware.logging import add_logging_middleware

from core.pipeline import FaceDistortionPipeline

from configs.settings import settings
from utils.logger import setup_logging, get_logger


setup_logging()
logger = get_logger(__name__)

def create_app(pipeline: Optional[FaceDistortionPipeline] = None) -> FastAPI:
    """Create FastAPI application"""

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifecycle management"""
        logger.info("Starting face distortion service", debug=settings.debug, log_level=settings.log_level)
        try:
            app.state.pipeline = pipeline or FaceDistortionPipeline()
            app.state.pipeline.initialize()
        except Exception as e:
            logger.error("Failed to initialize face distortion service", error=e)
            raise

        logger.info("Face distortion service started")
        yield
        logger.info("Face distortion service shutdown completed")

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description="Distorts faces in images stored in S3 - webhook mode",
        debug=settings.debug,
        lifespan=lifespan,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
    )

    # Add middleware (order is important)
    add_error_handlers(app)
    add_logging_middleware(app)

    app.include_router(api_v1_router, prefix="/api/v1")

    if settings.debug:
        for route in app.routes:
            if hasattr(route, 'methods') and hasattr(route, 'path'):
                logger.debug("Registered route", methods=sorted(route.methods), path=route.path)

    @app.get("/", tags=["root"])
    async def root():
        """Root path - Service information"""
        return {
            "service": settings.app_name,
            "version": settings.app_version,
            "status": "running",
            "docs_url": "/docs" if settings.debug else "disabled",
            "endpoints": {
                "events": "/api/v1/events",
                "health": "/api/v1/health"
            }
        }

    return app

if __name__ == "__main__":
    logger.info("Starting webhook server", host=settings.host, port=settings.port)
    uvicorn.run(
        "main:create_app",
        factory=True,
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level=settings.log_level.lower(),
        access_log=settings.debug,
    )
