"""
Object Storage Service - S3
"""
import asyncio
import boto3
from botocore.exceptions import BotoCoreError, ClientError
from typing import Dict, Any, Optional

from configs.aws_config import AWSConfig, aws_config
from utils.exceptions import StorageError
from utils.logger import get_logger

logger = get_logger(__name__)

MISSING_OBJECT_CODES = {"NoSuchKey", "NoSuchBucket", "404", "NotFound"}

class StorageService:
    """Downloads originals from the source region and uploads results to the destination region"""
    
    def __init__(self, config: Optional[AWSConfig] = None, source_client=None, destination_client=None):
        self.config = config or aws_config
        self._source_client = source_client
        self._destination_client = destination_client
    
    def _build_client(self, region: str):
        return boto3.client("s3", region_name=region, endpoint_url=self.config.s3_endpoint_url)
    
    @property
    def source_client(self):
        """S3 client for the source bucket region"""
        if self._source_client is None:
            self._source_client = self._build_client(self.config.source_region)
        return self._source_client
    
    @property
    def destination_client(self):
        """S3 client for the destination bucket region"""
        if self._destination_client is None:
            self._destination_client = self._build_client(self.config.destination_region)
        return self._destination_client
    
    def _to_storage_error(self, action: str, bucket: str, key: str, error: Exception) -> StorageError:
        if isinstance(error, ClientError):
            code = error.response.get("Error", {}).get("Code")
            status_code = 404 if code in MISSING_OBJECT_CODES else 502
            return StorageError(
                f"Failed to {action} s3://{bucket}/{key}: {code}",
                bucket=bucket,
                key=key,
                error_code=code,
                status_code=status_code
            )
        return StorageError(f"Failed to {action} s3://{bucket}/{key}: {error}", bucket=bucket, key=key)
    
    def _get_object_bytes(self, bucket: str, key: str) -> bytes:
        response = self.source_client.get_object(Bucket=bucket, Key=key)
        body = response["Body"]
        try:
            return body.read()
        finally:
            body.close()
    
    async def download_image(self, bucket: str, key: str) -> bytes:
        """Download the whole object into memory"""
        logger.debug("Downloading image", bucket=bucket, key=key)
        try:
            data = await asyncio.to_thread(self._get_object_bytes, bucket, key)
        except (ClientError, BotoCoreError) as e:
            error = self._to_storage_error("download", bucket, key, e)
            logger.error("Image download failed", error=error.message, bucket=bucket, key=key)
            raise error from e
        
        logger.info("Image downloaded", bucket=bucket, key=key, size=len(data))
        return data
    
    async def upload_image(self, bucket: str, key: str, body: bytes) -> Dict[str, Any]:
        """Upload the processed image"""
        params = {
            "Bucket": bucket,
            "Key": key,
            "Body": body,
            "ContentType": self.config.destination_content_type,
        }
        if self.config.destination_acl:
            params["ACL"] = self.config.destination_acl
        
        logger.debug("Uploading image", bucket=bucket, key=key, size=len(body))
        try:
            response = await asyncio.to_thread(self.destination_client.put_object, **params)
        except (ClientError, BotoCoreError) as e:
            error = self._to_storage_error("upload", bucket, key, e)
            logger.error("Image upload failed", error=error.message, bucket=bucket, key=key)
            raise error from e
        
        logger.info("Image uploaded", bucket=bucket, key=key, size=len(body), etag=response.get("ETag"))
        return response
    
    async def health_check(self) -> Dict[str, Any]:
        """Report client state, no network calls"""
        return {
            "status": "healthy",
            "source_region": self.config.source_region,
            "destination_region": self.config.destination_region,
            "destination_bucket": self.config.destination_bucket,
            "clients_ready": self._source_client is not None and self._destination_client is not None
        }
