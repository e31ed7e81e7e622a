"""
API Response Models
"""
from pydantic import BaseModel, Field
from typing import List, Dict, Any, Optional

class ProcessEventResponse(BaseModel):
    """Result of processing one S3 event notification"""
    success: bool = Field(True, description="Whether every record was processed")
    processed: int = Field(0, description="Number of records processed")
    skipped: int = Field(0, description="Records ignored (non-creation events)")
    results: List[Dict[str, Any]] = Field(default_factory=list, description="Per-object results")
    processing_time: float = Field(0, description="Processing time (seconds)")
    
    model_config = {
        "json_schema_extra": {
            "example": {
                "success": True,
                "processed": 1,
                "skipped": 0,
                "results": [
                    {
                        "source_bucket": "origin-bucket-name",
                        "source_key": "photos/team picture.jpg",
                        "destination_bucket": "destination-bucket-name",
                        "destination_key": "photos/team picture.jpg",
                        "status": "completed",
                        "faces_detected": 3,
                        "faces_distorted": 3
                    }
                ],
                "processing_time": 1.42
            }
        }
    }

class HealthResponse(BaseModel):
    """Health Check Response Model"""
    status: str = Field(..., description="Service status")
    service: str = Field(..., description="Service name")
    version: str = Field(..., description="Service version")
    timestamp: str = Field(..., description="Check time")
    checks: Optional[Dict[str, Any]] = Field(None, description="Component checks")
