"""
Face detection models
"""
from dataclasses import dataclass
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field

class BoundingBox(BaseModel):
    """Face box as ratios of the image width/height.

    Rekognition may return slightly negative origins or boxes that run past
    the image edge, so values are not bounded to [0, 1].
    """
    model_config = ConfigDict(extra="ignore", populate_by_name=True)
    
    left: float = Field(0.0, alias="Left")
    top: float = Field(0.0, alias="Top")
    width: float = Field(0.0, alias="Width")
    height: float = Field(0.0, alias="Height")

class FaceDetail(BaseModel):
    """Detected face"""
    model_config = ConfigDict(extra="ignore", populate_by_name=True)
    
    bounding_box: BoundingBox = Field(..., alias="BoundingBox")
    confidence: Optional[float] = Field(None, alias="Confidence")

@dataclass(frozen=True)
class PixelBox:
    """Face region in pixels, already clipped to the image"""
    x: int
    y: int
    width: int
    height: int
    
    @property
    def right(self) -> int:
        return self.x + self.width
    
    @property
    def bottom(self) -> int:
        return self.y + self.height
