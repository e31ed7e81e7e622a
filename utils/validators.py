"""
Validation tools
"""

# S3 object keys are limited to 1024 bytes of UTF-8
MAX_OBJECT_KEY_BYTES = 1024

class ValidationError(Exception):
    """Validation error"""
    pass

def validate_not_empty(value: str, field_name: str = "Field"):
    """Validate non-empty"""
    if not value or not value.strip():
        raise ValidationError(f"{field_name} cannot be empty")

def validate_max_bytes(value: str, max_bytes: int, field_name: str = "Field"):
    """Validate maximum encoded length"""
    if len(value.encode("utf-8")) > max_bytes:
        raise ValidationError(f"{field_name} length cannot exceed {max_bytes} bytes")

def validate_object_key(key: str):
    """Validate S3 object key"""
    validate_not_empty(key, "Object key")
    validate_max_bytes(key, MAX_OBJECT_KEY_BYTES, "Object key")

def validate_bucket_name(bucket: str):
    """Validate bucket name"""
    validate_not_empty(bucket, "Bucket name")
    if not 3 <= len(bucket) <= 63:
        raise ValidationError("Bucket name must be between 3 and 63 characters")
