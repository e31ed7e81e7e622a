"""
Service Layer Package
"""
from .storage_service import StorageService
from .face_detection_service import FaceDetectionService

__all__ = [
    "StorageService",
    "FaceDetectionService"
]
