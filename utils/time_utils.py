"""
Time utilities
"""
import time
from datetime import datetime, timezone
from typing import Optional

def now() -> datetime:
    """Get current UTC time"""
    return datetime.now(timezone.utc)

def now_ms() -> int:
    """Get current timestamp in milliseconds"""
    return int(time.time() * 1000)

def elapsed_seconds(start: Optional[datetime], end: Optional[datetime] = None) -> Optional[float]:
    """Seconds between two timestamps, None if start is unknown"""
    if start is None:
        return None
    return ((end or now()) - start).total_seconds()
