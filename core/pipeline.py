"""
Face distortion pipeline: download -> detect -> distort -> upload
"""
import asyncio
from typing import List, Dict, Any, Optional, Union

from pydantic import ValidationError as PydanticValidationError

from configs.aws_config import AWSConfig, aws_config
from models.event import S3EventNotification, S3EventRecord
from models.result import ProcessingResult, ProcessingStatus
from services.face_detection_service import FaceDetectionService
from services.storage_service import StorageService
from utils.exceptions import EventValidationError
from utils.logger import get_logger
from utils.validators import ValidationError, validate_bucket_name, validate_object_key
from .distortion import FaceDistorter

logger = get_logger(__name__)

NO_RECORDS_MESSAGE = "No records received for reading."

class FaceDistortionPipeline:
    """Processes S3 object-created notifications one record at a time"""

    def __init__(
        self,
        config: Optional[AWSConfig] = None,
        storage: Optional[StorageService] = None,
        detector: Optional[FaceDetectionService] = None,
        distorter: Optional[FaceDistorter] = None
    ):
        self.config = config or aws_config
        self.storage = storage or StorageService(self.config)
        self.detector = detector or FaceDetectionService(self.config)
        self.distorter = distorter or FaceDistorter()

        self._initialized = False
        self.processed_count = 0
        self.failed_count = 0

    def initialize(self):
        """Validate configuration before the first event"""
        try:
            self.config.validate_config()
            self._initialized = True
            logger.info(
                "Face distortion pipeline initialized",
                source_bucket=self.config.source_bucket,
                destination_bucket=self.config.destination_bucket,
                distortion_mode=self.distorter.config.mode
            )
        except ValueError as e:
            logger.error("Pipeline configuration invalid", error=str(e))
            raise

    def extract_records(self, event: Union[Dict[str, Any], S3EventNotification]) -> List[S3EventRecord]:
        """Parse the notification and keep the object-created records"""
        if isinstance(event, S3EventNotification):
            notification = event
        else:
            if not isinstance(event, dict) or not event.get("Records"):
                raise EventValidationError(NO_RECORDS_MESSAGE)
            try:
                notification = S3EventNotification.model_validate(event)
            except PydanticValidationError as e:
                logger.warning("Malformed event notification", error=str(e))
                raise EventValidationError(f"Malformed event notification: {e.error_count()} invalid field(s)") from e

        if not notification.records:
            raise EventValidationError(NO_RECORDS_MESSAGE)

        records = []
        for record in notification.records:
            if not record.is_object_created:
                logger.info("Skipping non-creation event", event_name=record.event_name, key=record.s3.object.key)
                continue
            try:
                validate_bucket_name(record.s3.bucket.name)
                validate_object_key(record.s3.object.decoded_key)
            except ValidationError as e:
                raise EventValidationError(str(e)) from e
            if self.config.writes_into_itself(record.s3.bucket.name, record.s3.object.decoded_key):
                logger.info(
                    "Skipping object written by this service",
                    bucket=record.s3.bucket.name,
                    key=record.s3.object.decoded_key
                )
                continue
            records.append(record)
        return records

    async def process_record(self, record: S3EventRecord) -> ProcessingResult:
        """Download, detect, distort and upload one object, in that order"""
        source_bucket = self.config.resolve_source_bucket(record.s3.bucket.name)
        key = record.s3.object.decoded_key
        result = ProcessingResult(
            source_bucket=source_bucket,
            source_key=key,
            destination_bucket=self.config.destination_bucket,
            destination_key=self.config.destination_key(key),
            status=ProcessingStatus.RUNNING
        )

        try:
            image_bytes = await self.storage.download_image(source_bucket, key)
            result.input_bytes = len(image_bytes)

            faces = await self.detector.detect_faces(image_bytes)
            result.faces_detected = len(faces)

            # Pixel work is CPU bound, keep it off the event loop
            distorted = await asyncio.to_thread(self.distorter.distort, image_bytes, faces)
            result.faces_distorted = distorted.faces_distorted
            result.output_bytes = len(distorted.data)

            await self.storage.upload_image(result.destination_bucket, result.destination_key, distorted.data)

            result.mark_completed()
            self.processed_count += 1
            logger.info(
                "Object processed",
                bucket=source_bucket,
                key=key,
                destination=f"{result.destination_bucket}/{result.destination_key}",
                faces=result.faces_detected,
                processing_time=result.processing_time
            )
            return result

        except Exception as e:
            result.mark_failed(e)
            self.failed_count += 1
            logger.error("Object processing failed", error=e, bucket=source_bucket, key=key)
            raise

    async def process_event(self, event: Union[Dict[str, Any], S3EventNotification]) -> List[ProcessingResult]:
        """Process every object-created record of the notification sequentially"""
        if not self._initialized:
            self.initialize()

        records = self.extract_records(event)
        logger.info("Event received", records=len(records))

        results = []
        for record in records:
            results.append(await self.process_record(record))
        return results

    async def get_status(self) -> Dict[str, Any]:
        """Pipeline status for health checks"""
        return {
            "initialized": self._initialized,
            "processed": self.processed_count,
            "failed": self.failed_count,
            "storage": await self.storage.health_check(),
            "face_detection": await self.detector.health_check()
        }
