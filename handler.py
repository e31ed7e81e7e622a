"""
AWS Lambda entry point
"""
import asyncio
from typing import Any, Dict, Optional

from core.pipeline import FaceDistortionPipeline
from utils.id_generator import generate_invocation_id
from utils.logger import get_logger

logger = get_logger(__name__)

# Built on the first invocation and reused while the container stays warm
_pipeline: Optional[FaceDistortionPipeline] = None

def get_pipeline() -> FaceDistortionPipeline:
    global _pipeline
    if _pipeline is None:
        _pipeline = FaceDistortionPipeline()
        _pipeline.initialize()
    return _pipeline

def lambda_handler(event: Dict[str, Any], context: Any = None) -> Dict[str, Any]:
    """Distort the faces of every image named in an S3 object-created notification"""
    request_id = getattr(context, "aws_request_id", None) or generate_invocation_id()
    logger.info("Invocation started", request_id=request_id)
    try:
        results = asyncio.run(get_pipeline().process_event(event))
    except Exception as e:
        logger.error("Invocation failed", error=e, request_id=request_id)
        raise

    logger.info("Invocation completed", request_id=request_id, processed=len(results))
    return {
        "request_id": request_id,
        "processed": len(results),
        "results": [result.to_dict() for result in results]
    }

# Lambda's default handler name
handler = lambda_handler
