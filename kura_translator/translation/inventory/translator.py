# kura_translator/translation/inventory/translator.py
import logging

from kura_translator.models.device import (
    DeviceInventoryBundle,
    DeviceInventoryContainer,
    DeviceInventoryItem,
    DeviceInventoryPackage,
    InventoryResponsePayload,
)
from .. import decoder
from ..envelope import ResponseEnvelope
from ..exceptions import PayloadValidationError
from .kura import (
    KuraInventoryBundles,
    KuraInventoryContainers,
    KuraInventoryItems,
    KuraInventoryPackages,
)

logger = logging.getLogger(__name__)

CONTAINER_STATES = {"ACTIVE", "INSTALLED", "UNINSTALLED", "UNKNOWN"}


def _require_name(field: str, name: str) -> None:
    if not name.strip():
        raise PayloadValidationError(field, "name must not be empty")


def translate_inventory_items_body(envelope: ResponseEnvelope) -> InventoryResponsePayload:
    items = None
    if envelope.has_body():
        kura_items = decoder.read_json_body_as(envelope.body, KuraInventoryItems, envelope.charset)
        items = []
        for item in kura_items.inventory:
            _require_name("inventory", item.name)
            items.append(DeviceInventoryItem(name=item.name, version=item.version, item_type=item.item_type))
    return InventoryResponsePayload(**envelope.payload_fields(), inventory_items=items)


def translate_inventory_bundles_body(envelope: ResponseEnvelope) -> InventoryResponsePayload:
    bundles = None
    if envelope.has_body():
        kura_bundles = decoder.read_json_body_as(envelope.body, KuraInventoryBundles, envelope.charset)
        bundles = []
        for bundle in kura_bundles.bundles:
            _require_name("bundles", bundle.name)
            if bundle.id < 0:
                raise PayloadValidationError("bundles.id", f"must not be negative, got {bundle.id}")
            bundles.append(DeviceInventoryBundle(
                id=bundle.id,
                name=bundle.name,
                version=bundle.version,
                status=bundle.state,
                signed=bundle.signed,
            ))
    return InventoryResponsePayload(**envelope.payload_fields(), bundles=bundles)


def translate_inventory_containers_body(envelope: ResponseEnvelope) -> InventoryResponsePayload:
    containers = None
    if envelope.has_body():
        kura_containers = decoder.read_json_body_as(envelope.body, KuraInventoryContainers, envelope.charset)
        containers = []
        for container in kura_containers.containers:
            _require_name("containers", container.name)
            state = container.state.upper() if container.state is not None else None
            if state is not None and state not in CONTAINER_STATES:
                raise PayloadValidationError("containers.state", f"unknown container state '{container.state}'")
            containers.append(DeviceInventoryContainer(
                name=container.name,
                version=container.version,
                container_type=container.container_type,
                state=state,
            ))
    return InventoryResponsePayload(**envelope.payload_fields(), containers=containers)


def translate_inventory_packages_body(envelope: ResponseEnvelope) -> InventoryResponsePayload:
    packages = None
    if envelope.has_body():
        kura_packages = decoder.read_json_body_as(envelope.body, KuraInventoryPackages, envelope.charset)
        packages = []
        for package in kura_packages.system_packages:
            _require_name("systemPackages", package.name)
            packages.append(DeviceInventoryPackage(
                name=package.name,
                version=package.version,
                package_type=package.package_type,
            ))
    logger.debug(f"Translated {len(packages) if packages is not None else 'no'} system packages")
    return InventoryResponsePayload(**envelope.payload_fields(), system_packages=packages)
