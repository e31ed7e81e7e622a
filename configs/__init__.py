"""
Configuration package
"""
from .settings import settings
from .aws_config import aws_config, AWSConfig
from .distortion_config import distortion_config, DistortionConfig

__all__ = [
    "settings",
    "aws_config",
    "AWSConfig",
    "distortion_config",
    "DistortionConfig",
]
