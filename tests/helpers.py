"""
Builders for test images and S3/Rekognition payloads
"""
import io
from typing import Any, Dict

from PIL import Image


def make_image_bytes(width: int = 100, height: int = 80, color=(50, 50, 50), fmt: str = "JPEG") -> bytes:
    buffer = io.BytesIO()
    Image.new("RGB", (width, height), color).save(buffer, format=fmt)
    return buffer.getvalue()


def make_event(*keys: str, bucket: str = "origin-bucket-name", event_name: str = "ObjectCreated:Put") -> Dict[str, Any]:
    return {
        "Records": [
            {
                "eventVersion": "2.1",
                "eventSource": "aws:s3",
                "awsRegion": "us-east-1",
                "eventName": event_name,
                "s3": {
                    "s3SchemaVersion": "1.0",
                    "bucket": {"name": bucket, "arn": f"arn:aws:s3:::{bucket}"},
                    "object": {"key": key, "size": 1024, "eTag": "d41d8cd98f00b204e9800998ecf8427e"}
                }
            }
            for key in keys
        ]
    }


def face_detail(left: float, top: float, width: float, height: float, confidence: float = 99.9) -> Dict[str, Any]:
    return {
        "BoundingBox": {"Left": left, "Top": top, "Width": width, "Height": height},
        "Confidence": confidence,
        "Landmarks": [],
        "Pose": {"Roll": 0.0, "Yaw": 0.0, "Pitch": 0.0},
        "Quality": {"Brightness": 80.0, "Sharpness": 90.0}
    }
