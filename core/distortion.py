"""
Face distortion - scrambles the pixels inside detected face boxes
"""
import io
import math
import numpy as np
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from PIL import Image, ImageOps, UnidentifiedImageError

from configs.distortion_config import DistortionConfig, distortion_config
from models.face import BoundingBox, FaceDetail, PixelBox
from utils.exceptions import ImageProcessingError
from utils.logger import get_logger

logger = get_logger(__name__)

@dataclass
class DistortedImage:
    """Encoded output plus what was done to it"""
    data: bytes
    width: int
    height: int
    boxes: List[PixelBox] = field(default_factory=list)

    @property
    def faces_distorted(self) -> int:
        return len(self.boxes)

def to_pixel_box(box: BoundingBox, image_width: int, image_height: int, margin: int = 10) -> Optional[PixelBox]:
    """Convert a ratio bounding box into a padded pixel box clipped to the image.

    The box is padded by ``margin`` on every side. Padding is clipped at the
    top/left edges, width/height are clipped at the bottom/right edges.
    Returns None when nothing of the box lies inside the image.
    """
    left = math.floor(box.left * image_width)
    top = math.floor(box.top * image_height)
    width = math.floor(box.width * image_width)
    height = math.floor(box.height * image_height)

    x = max(left - margin, 0)
    y = max(top - margin, 0)
    w = min(width + 2 * margin, image_width - x)
    h = min(height + 2 * margin, image_height - y)

    if w <= 0 or h <= 0:
        return None
    return PixelBox(x=x, y=y, width=w, height=h)

def distort_region(
    pixels: np.ndarray,
    box: PixelBox,
    rng: np.random.Generator,
    max_offset: int = 200,
    mode: str = "wrap"
) -> None:
    """Add one random offset per pixel to the colour channels inside ``box``, in place.

    ``pixels`` is an (height, width, channels) uint8 array. The same offset is
    added to R, G and B; a fourth (alpha) channel is left alone. In ``wrap``
    mode the truncated sum wraps modulo 256, in ``clamp`` mode it saturates.
    """
    region = pixels[box.y:box.bottom, box.x:box.right, :3]
    offsets = rng.random(region.shape[:2]) * max_offset

    values = np.floor(region.astype(np.float64) + offsets[..., np.newaxis]).astype(np.int64)
    if mode == "clamp":
        values = np.minimum(values, 255)
    else:
        values = np.mod(values, 256)

    pixels[box.y:box.bottom, box.x:box.right, :3] = values.astype(np.uint8)

class FaceDistorter:
    """Decodes an image, distorts face regions and re-encodes as JPEG"""

    def __init__(self, config: Optional[DistortionConfig] = None):
        self.config = config or distortion_config

    def new_rng(self) -> np.random.Generator:
        return np.random.default_rng(self.config.seed)

    def _decode(self, image_bytes: bytes) -> Image.Image:
        try:
            image = Image.open(io.BytesIO(image_bytes))
            image.load()
            # Face boxes refer to the upright image
            image = ImageOps.exif_transpose(image)
            return image.convert("RGB")
        except (UnidentifiedImageError, Image.DecompressionBombError, OSError, ValueError) as e:
            raise ImageProcessingError(f"Cannot decode image: {e}") from e

    def _encode(self, image: Image.Image) -> bytes:
        buffer = io.BytesIO()
        try:
            image.save(buffer, format="JPEG", quality=self.config.jpeg_quality)
        except (OSError, ValueError) as e:
            raise ImageProcessingError(f"Cannot encode image: {e}") from e
        return buffer.getvalue()

    def pixel_boxes(self, faces: Sequence[FaceDetail], image_width: int, image_height: int) -> List[PixelBox]:
        boxes = []
        for face in faces:
            box = to_pixel_box(face.bounding_box, image_width, image_height, self.config.margin)
            if box is None:
                logger.debug("Face box outside image, skipped", bounding_box=face.bounding_box.model_dump())
                continue
            boxes.append(box)
        return boxes

    def distort(
        self,
        image_bytes: bytes,
        faces: Sequence[FaceDetail],
        rng: Optional[np.random.Generator] = None
    ) -> DistortedImage:
        """Distort every face of the image; overlapping boxes are distorted once per box"""
        image = self._decode(image_bytes)
        width, height = image.size
        rng = rng or self.new_rng()

        boxes = self.pixel_boxes(faces, width, height)
        if boxes:
            pixels = np.array(image, dtype=np.uint8)
            for box in boxes:
                distort_region(pixels, box, rng, self.config.max_offset, self.config.mode)
            image = Image.fromarray(pixels)

        data = self._encode(image)
        logger.debug(
            "Image distorted",
            width=width,
            height=height,
            faces=len(faces),
            boxes=len(boxes),
            output_bytes=len(data)
        )
        return DistortedImage(data=data, width=width, height=height, boxes=boxes)

def distort_faces(
    image_bytes: bytes,
    faces: Sequence[FaceDetail],
    config: Optional[DistortionConfig] = None,
    rng: Optional[np.random.Generator] = None
) -> bytes:
    """Shortcut returning only the encoded JPEG"""
    return FaceDistorter(config).distort(image_bytes, faces, rng).data
