# kura_translator/models/common.py
from typing import Any, Dict, Optional
import uuid
from datetime import datetime, timezone
from pydantic import BaseModel, Field


def generate_request_id():
    return str(uuid.uuid4())


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def hex_bytes(value: Any) -> Any:
    """Replace bytes found in metric values (at any depth) with their hex form."""
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).hex()
    if isinstance(value, dict):
        return {k: hex_bytes(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [hex_bytes(v) for v in value]
    return value


class CustomBaseModel(BaseModel):
    """Base model for messages published by the service."""
    request_id: str = Field(default_factory=generate_request_id)
    timestamp: datetime = Field(default_factory=utcnow)


class ErrorMessage(CustomBaseModel):
    service: str = "kura_translator"
    error: str
    error_type: Optional[str] = None
    category: Optional[str] = None
    original_message: Optional[Dict[str, Any]] = None  # The raw message that failed to translate
