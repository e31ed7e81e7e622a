"""
Shared fixtures: in-memory images and mocked AWS clients
"""
import os

# Settings objects are built at import time
os.environ.setdefault("DESTINATION_BUCKET", "destination-bucket-name")
os.environ.setdefault("LOG_LEVEL", "DEBUG")
os.environ.setdefault("AWS_DEFAULT_REGION", "us-east-1")

from typing import Any, Dict, List
from unittest.mock import MagicMock

import pytest

from configs.aws_config import AWSConfig
from configs.distortion_config import DistortionConfig
from tests.helpers import face_detail, make_image_bytes


@pytest.fixture
def aws_settings() -> AWSConfig:
    return AWSConfig(
        DESTINATION_BUCKET="destination-bucket-name",
        AWS_SOURCE_REGION="us-east-1",
        AWS_DESTINATION_REGION="sa-east-1",
    )


@pytest.fixture
def distortion_settings() -> DistortionConfig:
    return DistortionConfig(DISTORTION_SEED=1234)


@pytest.fixture
def jpeg_bytes() -> bytes:
    return make_image_bytes()


@pytest.fixture
def s3_source_client(jpeg_bytes) -> MagicMock:
    client = MagicMock(name="s3_source")
    body = MagicMock(name="streaming_body")
    body.read.return_value = jpeg_bytes
    client.get_object.return_value = {"Body": body, "ContentLength": len(jpeg_bytes)}
    return client


@pytest.fixture
def s3_destination_client() -> MagicMock:
    client = MagicMock(name="s3_destination")
    client.put_object.return_value = {"ETag": '"etag"'}
    return client


@pytest.fixture
def rekognition_faces() -> List[Dict[str, Any]]:
    return [face_detail(0.3, 0.3, 0.2, 0.25)]


@pytest.fixture
def rekognition_client(rekognition_faces) -> MagicMock:
    client = MagicMock(name="rekognition")
    client.detect_faces.return_value = {"FaceDetails": rekognition_faces}
    return client
