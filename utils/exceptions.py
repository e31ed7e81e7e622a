"""
Exception handling
"""
from typing import Optional
from fastapi import Request, HTTPException
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from utils.logger import get_logger
from utils.time_utils import now_ms

logger = get_logger("exceptions")

class BusinessError(Exception):
    """Base class for business errors"""
    def __init__(self, message: str, status_code: int = 400):
        self.message = message
        self.status_code = status_code
        super().__init__(message)

class FaceDistortError(BusinessError):
    """Face distortion pipeline errors"""
    def __init__(self, message: str, status_code: int = 500):
        super().__init__(message, status_code)

class EventValidationError(FaceDistortError):
    """The incoming notification carries nothing to process"""
    def __init__(self, message: str):
        super().__init__(message, 400)

class StorageError(FaceDistortError):
    """Object storage download/upload failed"""
    def __init__(self, message: str, bucket: Optional[str] = None, key: Optional[str] = None,
                 error_code: Optional[str] = None, status_code: int = 502):
        self.bucket = bucket
        self.key = key
        self.error_code = error_code
        super().__init__(message, status_code)

class FaceDetectionError(FaceDistortError):
    """Face detection service call failed"""
    def __init__(self, message: str, error_code: Optional[str] = None, status_code: int = 502):
        self.error_code = error_code
        super().__init__(message, status_code)

class ImageProcessingError(FaceDistortError):
    """Image could not be decoded, distorted or encoded"""
    def __init__(self, message: str):
        super().__init__(message, 422)

async def business_error_handler(request: Request, exc: BusinessError):
    """Business error handler"""
    logger.warning("Business error", error=exc.message, path=request.url.path, status=exc.status_code)
    return JSONResponse(
        status_code=exc.status_code,
        content={
            "success": False,
            "error": {"message": exc.message, "type": type(exc).__name__},
            "timestamp": now_ms()
        }
    )

async def request_validation_error_handler(request: Request, exc: RequestValidationError):
    """Request body errors, answered like an invalid event notification"""
    logger.warning("Request validation error", errors=len(exc.errors()), path=request.url.path)
    return await business_error_handler(
        request,
        EventValidationError(f"Malformed event notification: {len(exc.errors())} invalid field(s)")
    )

async def http_error_handler(request: Request, exc: HTTPException):
    """HTTP error handler"""
    logger.warning("HTTP error", status=exc.status_code, detail=exc.detail)
    return JSONResponse(
        status_code=exc.status_code,
        content={
            "success": False,
            "error": {"message": str(exc.detail), "type": "HTTPException"},
            "timestamp": now_ms()
        }
    )

async def general_error_handler(request: Request, exc: Exception):
    """General error handler"""
    logger.error("Unexpected error", error=exc, path=request.url.path)
    return JSONResponse(
        status_code=500,
        content={
            "success": False,
            "error": {"message": "Internal server error", "type": "InternalError"},
            "timestamp": now_ms()
        }
    )
