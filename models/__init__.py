"""
Model package
"""
from .event import (
    S3Bucket,
    S3Object,
    S3Entity,
    S3EventRecord,
    S3EventNotification
)
from .face import (
    BoundingBox,
    FaceDetail,
    PixelBox
)
from .result import (
    ProcessingStatus,
    ProcessingResult
)
from .response import (
    ProcessEventResponse,
    HealthResponse
)

__all__ = [
    # Event models
    "S3Bucket",
    "S3Object",
    "S3Entity",
    "S3EventRecord",
    "S3EventNotification",
    
    # Face models
    "BoundingBox",
    "FaceDetail",
    "PixelBox",
    
    # Result models
    "ProcessingStatus",
    "ProcessingResult",
    
    # Response models
    "ProcessEventResponse",
    "HealthResponse"
]
