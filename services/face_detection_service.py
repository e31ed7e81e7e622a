"""
Face Detection Service - AWS Rekognition
"""
import asyncio
import boto3
from botocore.exceptions import BotoCoreError, ClientError
from typing import Dict, Any, List, Optional

from configs.aws_config import AWSConfig, aws_config
from configs.distortion_config import DistortionConfig, distortion_config
from models.face import FaceDetail
from utils.exceptions import FaceDetectionError
from utils.logger import get_logger

logger = get_logger(__name__)

# Rekognition rejects these inputs outright, retrying will not help
INVALID_IMAGE_CODES = {"InvalidImageFormatException", "ImageTooLargeException", "InvalidParameterException"}

class FaceDetectionService:
    """Face Detection Service - Rekognition DetectFaces"""
    
    def __init__(
        self,
        config: Optional[AWSConfig] = None,
        detection_config: Optional[DistortionConfig] = None,
        client=None
    ):
        self.config = config or aws_config
        self.detection_config = detection_config or distortion_config
        self._client = client
    
    @property
    def client(self):
        if self._client is None:
            self._client = boto3.client("rekognition", region_name=self.config.rekognition_region)
        return self._client
    
    def _parse_faces(self, response: Dict[str, Any]) -> List[FaceDetail]:
        faces = [FaceDetail.model_validate(item) for item in response.get("FaceDetails", [])]
        min_confidence = self.detection_config.min_face_confidence
        if min_confidence > 0:
            kept = [f for f in faces if f.confidence is None or f.confidence >= min_confidence]
            if len(kept) != len(faces):
                logger.info(
                    "Dropped low confidence faces",
                    dropped=len(faces) - len(kept),
                    min_confidence=min_confidence
                )
            faces = kept
        return faces
    
    async def detect_faces(self, image_bytes: bytes) -> List[FaceDetail]:
        """Detect faces in the image bytes"""
        try:
            response = await asyncio.to_thread(
                self.client.detect_faces,
                Image={"Bytes": image_bytes},
                Attributes=["DEFAULT"]
            )
        except ClientError as e:
            code = e.response.get("Error", {}).get("Code")
            status_code = 422 if code in INVALID_IMAGE_CODES else 502
            logger.error("Face detection failed", error=code, size=len(image_bytes))
            raise FaceDetectionError(f"Face detection failed: {code}", error_code=code, status_code=status_code) from e
        except BotoCoreError as e:
            logger.error("Face detection failed", error=e)
            raise FaceDetectionError(f"Face detection failed: {e}") from e
        
        faces = self._parse_faces(response)
        logger.info("Faces detected", faces=len(faces), orientation=response.get("OrientationCorrection"))
        return faces
    
    async def health_check(self) -> Dict[str, Any]:
        """Report client state, no network calls"""
        return {
            "status": "healthy",
            "region": self.config.rekognition_region,
            "client_ready": self._client is not None
        }
