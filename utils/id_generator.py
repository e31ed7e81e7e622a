"""
ID Generator Utils
"""
import uuid

def generate_invocation_id() -> str:
    """Generate invocation ID when the runtime does not provide one"""
    return f"inv_{uuid.uuid4().hex[:12]}"
