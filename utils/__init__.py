"""
Utils Package
"""
from .logger import get_logger
from .id_generator import generate_invocation_id
from .time_utils import now, now_ms
from .validators import validate_object_key, validate_bucket_name, ValidationError
from .exceptions import (
    BusinessError,
    FaceDistortError,
    EventValidationError,
    StorageError,
    FaceDetectionError,
    ImageProcessingError,
)

__all__ = [
    # Logging
    "get_logger",
    
    # ID Generation
    "generate_invocation_id",
    
    # Time
    "now",
    "now_ms",
    
    # Validation
    "validate_object_key",
    "validate_bucket_name",
    "ValidationError",
    
    # Exceptions
    "BusinessError",
    "FaceDistortError",
    "EventValidationError",
    "StorageError",
    "FaceDetectionError",
    "ImageProcessingError",
]
