# kura_translator/models/raw.py
from datetime import datetime
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, field_serializer

from .common import hex_bytes, utcnow


class RawDeviceMessage(BaseModel):
    """
    Raw message as received from a device connector.

    The Kura protobuf envelope has already been unpacked by the connector:
    metrics arrive as a plain dict and the body as opaque bytes. Kura metrics
    may hold byte arrays; those are hex encoded in JSON output.
    """
    model_config = ConfigDict(frozen=True, ser_json_bytes="hex")

    connector_name: str
    topic: str  # e.g. "$EDC/acme/gw-1/KEYS-V1/REPLY/req-1"
    body: Optional[bytes] = None
    metrics: Dict[str, Any] = Field(default_factory=dict)
    received_on: datetime = Field(default_factory=utcnow)
    sent_on: Optional[datetime] = None
    metadata: Dict[str, Any] = Field(default_factory=dict)

    @field_serializer("metrics", "metadata", when_used="json")
    def _serialize_values(self, value: Dict[str, Any]) -> Dict[str, Any]:
        return hex_bytes(value)

    def has_body(self) -> bool:
        return bool(self.body)

    def body_hex(self) -> Optional[str]:
        return self.body.hex() if self.body else None

    def to_log_dict(self) -> Dict[str, Any]:
        """Dict form safe for JSON transport; the body is hex encoded."""
        data = self.model_dump(mode="json", exclude={"body"})
        data["body_hex"] = self.body_hex()
        return data
