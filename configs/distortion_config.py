"""
Face distortion configuration
"""
from pydantic_settings import BaseSettings
from pydantic import Field, field_validator
from typing import Optional
from pathlib import Path

env_path = Path(__file__).parent.parent / ".env"

DISTORTION_MODES = ("wrap", "clamp")

class DistortionConfig(BaseSettings):
    """Distortion Configuration"""
    
    # Padding added around each detected face box (pixels)
    margin: int = Field(default=10, ge=0, alias="DISTORTION_MARGIN")
    # Random offsets are drawn from [0, max_offset)
    max_offset: int = Field(default=200, ge=1, le=256, alias="DISTORTION_MAX_OFFSET")
    mode: str = Field(default="wrap", alias="DISTORTION_MODE")
    seed: Optional[int] = Field(default=None, alias="DISTORTION_SEED")
    
    jpeg_quality: int = Field(default=90, ge=1, le=95, alias="JPEG_QUALITY")
    min_face_confidence: float = Field(default=0.0, ge=0.0, le=100.0, alias="MIN_FACE_CONFIDENCE")
    
    model_config = {
        "env_file": env_path,
        "env_file_encoding": "utf-8",
        "extra": "allow"
    }
    
    @field_validator("mode")
    @classmethod
    def validate_mode(cls, v):
        v = v.strip().lower()
        if v not in DISTORTION_MODES:
            raise ValueError(f"DISTORTION_MODE must be one of {', '.join(DISTORTION_MODES)}")
        return v

distortion_config = DistortionConfig()
