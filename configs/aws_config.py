"""
AWS Configuration - S3 buckets and Rekognition
"""
from pydantic_settings import BaseSettings
from pydantic import Field
from typing import Optional
from pathlib import Path

env_path = Path(__file__).parent.parent / ".env"

class AWSConfig(BaseSettings):
    """AWS Configuration"""
    
    # Regions: the source bucket, the destination bucket and Rekognition may live apart
    source_region: str = Field(default="us-east-1", alias="AWS_SOURCE_REGION")
    destination_region: str = Field(default="sa-east-1", alias="AWS_DESTINATION_REGION")
    rekognition_region: str = Field(default="us-east-1", alias="AWS_REKOGNITION_REGION")
    
    # Buckets
    source_bucket: Optional[str] = Field(default=None, alias="SOURCE_BUCKET")
    destination_bucket: Optional[str] = Field(default=None, alias="DESTINATION_BUCKET")
    destination_key_prefix: str = Field(default="", alias="DESTINATION_KEY_PREFIX")
    
    # Upload options
    destination_acl: Optional[str] = Field(default="public-read", alias="DESTINATION_ACL")
    destination_content_type: str = Field(default="image/jpeg", alias="DESTINATION_CONTENT_TYPE")
    
    # Optional endpoint override (S3-compatible stores, localstack)
    s3_endpoint_url: Optional[str] = Field(default=None, alias="S3_ENDPOINT_URL")
    
    model_config = {
        "env_file": env_path,
        "env_file_encoding": "utf-8",
        "extra": "allow"
    }
    
    def resolve_source_bucket(self, event_bucket: Optional[str]) -> Optional[str]:
        """The configured source bucket wins over the one named in the event"""
        return self.source_bucket or event_bucket
    
    def destination_key(self, source_key: str) -> str:
        return f"{self.destination_key_prefix}{source_key}"
    
    def writes_into_itself(self, event_bucket: Optional[str], source_key: str) -> bool:
        """True when the object is output of this service (same bucket, unchanged or already prefixed key)"""
        if self.resolve_source_bucket(event_bucket) != self.destination_bucket:
            return False
        prefix = self.destination_key_prefix
        return not prefix or source_key.startswith(prefix)
    
    def validate_config(self):
        """Validate Configuration"""
        if not self.destination_bucket:
            raise ValueError("DESTINATION_BUCKET is required")
        if (
            self.source_bucket
            and self.source_bucket == self.destination_bucket
            and not self.destination_key_prefix
        ):
            raise ValueError(
                "DESTINATION_BUCKET must differ from SOURCE_BUCKET unless DESTINATION_KEY_PREFIX is set"
            )

aws_config = AWSConfig()
