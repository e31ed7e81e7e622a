"""
Processing result models
"""
from enum import Enum
from typing import Dict, Any, Optional
from datetime import datetime
from dataclasses import dataclass, field

from utils.time_utils import now, elapsed_seconds

class ProcessingStatus(Enum):
    """Processing status enumeration"""
    PENDING = "pending"
    RUNNING = "running"
    COMPLETED = "completed"
    FAILED = "failed"

@dataclass
class ProcessingResult:
    """Outcome of processing one object"""
    source_bucket: str
    source_key: str
    destination_bucket: Optional[str] = None
    destination_key: Optional[str] = None
    status: ProcessingStatus = ProcessingStatus.PENDING
    
    faces_detected: int = 0
    faces_distorted: int = 0
    input_bytes: int = 0
    output_bytes: int = 0
    
    # Timestamps
    started_at: datetime = field(default_factory=now)
    completed_at: Optional[datetime] = None
    error_message: Optional[str] = None
    
    def mark_completed(self):
        self.status = ProcessingStatus.COMPLETED
        self.completed_at = now()
    
    def mark_failed(self, error: Exception):
        self.status = ProcessingStatus.FAILED
        self.completed_at = now()
        self.error_message = str(error)
    
    @property
    def processing_time(self) -> Optional[float]:
        """Processing time (seconds)"""
        if self.completed_at is None:
            return None
        return elapsed_seconds(self.started_at, self.completed_at)
    
    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            "source_bucket": self.source_bucket,
            "source_key": self.source_key,
            "destination_bucket": self.destination_bucket,
            "destination_key": self.destination_key,
            "status": self.status.value,
            "faces_detected": self.faces_detected,
            "faces_distorted": self.faces_distorted,
            "input_bytes": self.input_bytes,
            "output_bytes": self.output_bytes,
            "started_at": self.started_at.isoformat(),
            "completed_at": self.completed_at.isoformat() if self.completed_at else None,
            "processing_time": self.processing_time,
            "error_message": self.error_message
        }
