# kura_translator/models/device.py
"""
Canonical internal message model.

Every translated device reply becomes a ResponseMessage whose payload is one
of the category payloads below. Payload item fields are either fully
populated or None; the has_* properties report which. Lifecycle
notifications (a device going missing) are not replies and become a
LifecycleMessage instead.
"""
from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_serializer

from .common import hex_bytes


class ResponseCode(str, Enum):
    ACCEPTED = "ACCEPTED"
    BAD_REQUEST = "BAD_REQUEST"
    NOT_FOUND = "NOT_FOUND"
    INTERNAL_ERROR = "INTERNAL_ERROR"


class DeviceModel(BaseModel):
    model_config = ConfigDict(frozen=True)


class ResponseChannel(DeviceModel):
    account: str
    client_id: str
    app_name: str
    app_version: str
    verb: str = "REPLY"
    request_id: Optional[str] = None
    semantic_parts: List[str] = Field(default_factory=list)


# --- keystore ---

class DeviceKeystore(DeviceModel):
    id: str
    keystore_type: Optional[str] = None
    size: Optional[int] = None


class DeviceKeystoreSubjectAN(DeviceModel):
    an_type: Optional[str] = None
    value: Optional[str] = None


class DeviceKeystoreItem(DeviceModel):
    keystore_id: Optional[str] = None
    alias: str
    item_type: Optional[str] = None
    size: Optional[int] = None
    algorithm: Optional[str] = None
    subject_dn: Optional[str] = None
    subject_an: List[DeviceKeystoreSubjectAN] = Field(default_factory=list)
    issuer: Optional[str] = None
    not_before: Optional[datetime] = None
    not_after: Optional[datetime] = None
    certificate: Optional[str] = None
    certificate_chain: List[str] = Field(default_factory=list)


class DeviceKeystoreCSR(DeviceModel):
    signing_request: str


# --- inventory ---

class DeviceInventoryItem(DeviceModel):
    name: str
    version: Optional[str] = None
    item_type: Optional[str] = None


class DeviceInventoryBundle(DeviceModel):
    id: int
    name: str
    version: Optional[str] = None
    status: Optional[str] = None
    signed: Optional[bool] = None


class DeviceInventoryContainer(DeviceModel):
    name: str
    version: Optional[str] = None
    container_type: Optional[str] = None
    state: Optional[str] = None


class DeviceInventoryPackage(DeviceModel):
    name: str
    version: Optional[str] = None
    package_type: Optional[str] = None


# --- command ---

class DeviceCommandOutput(DeviceModel):
    stdout: Optional[str] = None
    stderr: Optional[str] = None
    exit_code: Optional[int] = None
    has_timed_out: bool = False
    exception_message: Optional[str] = None
    exception_stack: Optional[str] = None


# --- payloads ---

class ResponsePayload(DeviceModel):
    """Fields common to every reply, filled by the envelope translation."""
    exception_message: Optional[str] = None
    exception_stack: Optional[str] = None
    metrics: Dict[str, Any] = Field(default_factory=dict)

    @field_serializer("metrics", when_used="json")
    def _serialize_metrics(self, value: Dict[str, Any]) -> Dict[str, Any]:
        return hex_bytes(value)


class KeystoreResponsePayload(ResponsePayload):
    keystores: Optional[List[DeviceKeystore]] = None
    keystore_items: Optional[List[DeviceKeystoreItem]] = None
    keystore_item: Optional[DeviceKeystoreItem] = None
    csr: Optional[DeviceKeystoreCSR] = None

    @property
    def has_keystores(self) -> bool:
        return self.keystores is not None

    @property
    def has_items(self) -> bool:
        return self.keystore_items is not None

    @property
    def has_item(self) -> bool:
        return self.keystore_item is not None

    @property
    def has_csr(self) -> bool:
        return self.csr is not None


class InventoryResponsePayload(ResponsePayload):
    inventory_items: Optional[List[DeviceInventoryItem]] = None
    bundles: Optional[List[DeviceInventoryBundle]] = None
    containers: Optional[List[DeviceInventoryContainer]] = None
    system_packages: Optional[List[DeviceInventoryPackage]] = None

    @property
    def has_inventory_items(self) -> bool:
        return self.inventory_items is not None

    @property
    def has_bundles(self) -> bool:
        return self.bundles is not None

    @property
    def has_containers(self) -> bool:
        return self.containers is not None

    @property
    def has_system_packages(self) -> bool:
        return self.system_packages is not None


class CommandResponsePayload(ResponsePayload):
    command_output: Optional[DeviceCommandOutput] = None

    @property
    def has_command_output(self) -> bool:
        return self.command_output is not None


# --- lifecycle ---

class LifecyclePhase(str, Enum):
    MISSING = "MISSING"


class LifecycleChannel(DeviceModel):
    account: str
    client_id: str
    phase: LifecyclePhase


class LifecyclePayload(DeviceModel):
    """Metrics and optional body shared by every lifecycle notification."""
    metrics: Dict[str, Any] = Field(default_factory=dict)
    body: Optional[bytes] = None

    @field_serializer("metrics", when_used="json")
    def _serialize_metrics(self, value: Dict[str, Any]) -> Dict[str, Any]:
        return hex_bytes(value)

    @field_serializer("body", when_used="json")
    def _serialize_body(self, value: Optional[bytes]) -> Optional[str]:
        return value.hex() if value else None

    @property
    def has_body(self) -> bool:
        return bool(self.body)


class MissingPayload(LifecyclePayload):
    pass


# --- messages ---

class DeviceMessage(DeviceModel):
    """Fields every translated message carries, whatever its kind."""
    category: str
    connector_name: str
    client_id: str
    received_on: datetime
    sent_on: Optional[datetime] = None

    def describe(self) -> str:
        return self.category


class ResponseMessage(DeviceMessage):
    channel: ResponseChannel
    response_code: ResponseCode
    payload: ResponsePayload

    def describe(self) -> str:
        return f"{self.category} {self.response_code.value}"


class KeystoreResponseMessage(ResponseMessage):
    payload: KeystoreResponsePayload


class InventoryResponseMessage(ResponseMessage):
    payload: InventoryResponsePayload


class CommandResponseMessage(ResponseMessage):
    payload: CommandResponsePayload


class LifecycleMessage(DeviceMessage):
    channel: LifecycleChannel
    payload: LifecyclePayload

    def describe(self) -> str:
        return f"{self.category} {self.channel.phase.value}"


class MissingMessage(LifecycleMessage):
    payload: MissingPayload
