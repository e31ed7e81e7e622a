"""
S3 event notification API routes
"""
import time
from typing import Any, Dict
from fastapi import APIRouter, Body, Request

from models.response import ProcessEventResponse
from utils.logger import get_logger

logger = get_logger(__name__)
router = APIRouter()

@router.post("/events", response_model=ProcessEventResponse)
async def process_event(req: Request, event: Dict[str, Any] = Body(...)) -> ProcessEventResponse:
    """Handle an S3 (or S3-compatible) object-created notification"""
    start_time = time.time()
    pipeline = req.app.state.pipeline
    records = event.get("Records")
    received = len(records) if isinstance(records, list) else 0
    logger.info(
        "Received event notification",
        records=received,
        request_id=getattr(req.state, "request_id", None)
    )
    
    # The pipeline validates the notification; its errors reach the registered exception handlers
    results = await pipeline.process_event(event)
    
    return ProcessEventResponse(
        success=True,
        processed=len(results),
        skipped=received - len(results),
        results=[result.to_dict() for result in results],
        processing_time=round(time.time() - start_time, 3)
    )
