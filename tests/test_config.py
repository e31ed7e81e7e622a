"""
Unit tests for configuration objects.
"""
import pytest
from pydantic import ValidationError

from configs.aws_config import AWSConfig
from configs.distortion_config import DistortionConfig


class TestAWSConfig:
    """Test bucket resolution and validation."""

    def test_default_regions_and_upload_options(self, aws_settings):
        assert aws_settings.source_region == "us-east-1"
        assert aws_settings.destination_region == "sa-east-1"
        assert aws_settings.rekognition_region == "us-east-1"
        assert aws_settings.destination_acl == "public-read"
        assert aws_settings.destination_content_type == "image/jpeg"

    def test_missing_destination_bucket_is_invalid(self, monkeypatch):
        monkeypatch.delenv("DESTINATION_BUCKET", raising=False)
        config = AWSConfig(_env_file=None)
        with pytest.raises(ValueError, match="DESTINATION_BUCKET"):
            config.validate_config()

    def test_same_source_and_destination_is_invalid(self):
        config = AWSConfig(SOURCE_BUCKET="photos", DESTINATION_BUCKET="photos")
        with pytest.raises(ValueError):
            config.validate_config()

    def test_same_bucket_allowed_with_prefix(self):
        config = AWSConfig(SOURCE_BUCKET="photos", DESTINATION_BUCKET="photos", DESTINATION_KEY_PREFIX="distorted/")
        config.validate_config()
        assert config.destination_key("a.jpg") == "distorted/a.jpg"

    def test_configured_source_bucket_wins(self):
        config = AWSConfig(SOURCE_BUCKET="origin-bucket-name", DESTINATION_BUCKET="out")
        assert config.resolve_source_bucket("other") == "origin-bucket-name"

    def test_event_bucket_used_without_override(self, aws_settings):
        assert aws_settings.resolve_source_bucket("event-bucket") == "event-bucket"


    @pytest.mark.parametrize("event_bucket, key, prefix, expected", [
        ("watched-bucket", "a.jpg", "", True),
        ("watched-bucket", "distorted/a.jpg", "distorted/", True),
        ("watched-bucket", "a.jpg", "distorted/", False),
        ("other-bucket", "a.jpg", "", False),
    ])
    def test_output_of_this_service_detected(self, event_bucket, key, prefix, expected):
        config = AWSConfig(DESTINATION_BUCKET="watched-bucket", DESTINATION_KEY_PREFIX=prefix)
        assert config.writes_into_itself(event_bucket, key) is expected

class TestDistortionConfig:
    """Test distortion parameter validation."""

    def test_defaults(self):
        config = DistortionConfig()
        assert config.margin == 10
        assert config.max_offset == 200
        assert config.mode == "wrap"

    def test_mode_is_normalised(self):
        assert DistortionConfig(DISTORTION_MODE=" Clamp ").mode == "clamp"

    def test_unknown_mode_rejected(self):
        with pytest.raises(ValidationError):
            DistortionConfig(DISTORTION_MODE="blur")

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("DISTORTION_MARGIN", "4")
        monkeypatch.setenv("DISTORTION_MAX_OFFSET", "64")
        config = DistortionConfig()
        assert config.margin == 4
        assert config.max_offset == 64
