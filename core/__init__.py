"""
Core module package
"""
from .distortion import FaceDistorter, DistortedImage, to_pixel_box, distort_region, distort_faces
from .pipeline import FaceDistortionPipeline

__all__ = [
    "FaceDistorter",
    "DistortedImage",
    "to_pixel_box",
    "distort_region",
    "distort_faces",
    "FaceDistortionPipeline"
]
