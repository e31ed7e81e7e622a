"""
S3 event notification models
"""
from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional
from urllib.parse import unquote_plus

class S3Bucket(BaseModel):
    """Bucket that emitted the notification"""
    model_config = ConfigDict(extra="ignore", populate_by_name=True)
    
    name: str = Field(..., description="Bucket name")
    arn: Optional[str] = Field(None, description="Bucket ARN")

class S3Object(BaseModel):
    """Object the notification refers to"""
    model_config = ConfigDict(extra="ignore", populate_by_name=True)
    
    key: str = Field(..., description="Object key, URL form-encoded as delivered by S3")
    size: Optional[int] = Field(None, description="Object size in bytes")
    e_tag: Optional[str] = Field(None, alias="eTag")
    version_id: Optional[str] = Field(None, alias="versionId")
    
    @property
    def decoded_key(self) -> str:
        """Object key with '+' and %xx escapes decoded"""
        return unquote_plus(self.key)

class S3Entity(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)
    
    bucket: S3Bucket
    object: S3Object

class S3EventRecord(BaseModel):
    """Single record of an S3 event notification"""
    model_config = ConfigDict(extra="ignore", populate_by_name=True)
    
    event_name: Optional[str] = Field(None, alias="eventName")
    event_source: Optional[str] = Field(None, alias="eventSource")
    aws_region: Optional[str] = Field(None, alias="awsRegion")
    event_time: Optional[str] = Field(None, alias="eventTime")
    s3: S3Entity
    
    @property
    def is_object_created(self) -> bool:
        """Records without an event name are treated as creations"""
        if not self.event_name:
            return True
        # AWS sends "ObjectCreated:Put", MinIO sends "s3:ObjectCreated:Put"
        return self.event_name.split("s3:", 1)[-1].startswith("ObjectCreated")

class S3EventNotification(BaseModel):
    """S3 event notification as delivered to Lambda or a webhook"""
    model_config = ConfigDict(
        extra="ignore",
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "Records": [
                    {
                        "eventSource": "aws:s3",
                        "awsRegion": "us-east-1",
                        "eventName": "ObjectCreated:Put",
                        "s3": {
                            "bucket": {"name": "origin-bucket-name"},
                            "object": {"key": "photos/team+picture.jpg", "size": 204800}
                        }
                    }
                ]
            }
        }
    )
    
    records: List[S3EventRecord] = Field(default_factory=list, alias="Records")
