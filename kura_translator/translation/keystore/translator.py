# kura_translator/translation/keystore/translator.py
"""
Keystore reply translation.

Covers the four replies of the Kura keystore application: the keystore list,
the item list, a single item and a certificate signing request.
"""
import logging
from datetime import datetime, timezone
from typing import Optional

from kura_translator.models.device import (
    DeviceKeystore,
    DeviceKeystoreCSR,
    DeviceKeystoreItem,
    DeviceKeystoreSubjectAN,
    KeystoreResponsePayload,
)
from .. import decoder
from ..envelope import ResponseEnvelope
from ..exceptions import PayloadValidationError
from .kura import KuraKeystore, KuraKeystoreItem, KuraKeystoreItems, KuraKeystores

logger = logging.getLogger(__name__)

CSR_HEADERS = ("-----BEGIN CERTIFICATE REQUEST-----", "-----BEGIN NEW CERTIFICATE REQUEST-----")


def _from_epoch_millis(value: Optional[int]) -> Optional[datetime]:
    if value is None:
        return None
    return datetime.fromtimestamp(value / 1000, tz=timezone.utc)


def validate_keystore(keystore: KuraKeystore) -> None:
    if not keystore.keystore_service_pid.strip():
        raise PayloadValidationError("keystoreServicePid", "must not be empty")
    if keystore.size is not None and keystore.size < 0:
        raise PayloadValidationError("size", f"must not be negative, got {keystore.size}")


def validate_keystore_item(item: KuraKeystoreItem) -> None:
    if not item.alias.strip():
        raise PayloadValidationError("alias", "must not be empty")
    if item.size is not None and item.size < 0:
        raise PayloadValidationError("size", f"must not be negative, got {item.size}")
    if item.certificate_chain and any(not c.strip() for c in item.certificate_chain):
        raise PayloadValidationError("certificateChain", "must not contain empty certificates")
    if item.start_date is not None and item.expiration_date is not None \
            and item.start_date > item.expiration_date:
        raise PayloadValidationError("startDate", "is after expirationDate")


def translate_keystore(keystore: KuraKeystore) -> DeviceKeystore:
    validate_keystore(keystore)
    return DeviceKeystore(
        id=keystore.keystore_service_pid,
        keystore_type=keystore.keystore_type,
        size=keystore.size,
    )


def translate_keystore_item(item: KuraKeystoreItem) -> DeviceKeystoreItem:
    validate_keystore_item(item)
    return DeviceKeystoreItem(
        keystore_id=item.keystore_service_pid,
        alias=item.alias,
        item_type=item.item_type,
        size=item.size,
        algorithm=item.algorithm,
        subject_dn=item.subject_dn,
        subject_an=[DeviceKeystoreSubjectAN(an_type=an.an_type, value=an.value) for an in item.subject_an or []],
        issuer=item.issuer,
        not_before=_from_epoch_millis(item.start_date),
        not_after=_from_epoch_millis(item.expiration_date),
        certificate=item.certificate,
        certificate_chain=list(item.certificate_chain or []),
    )


def translate_keystores_body(envelope: ResponseEnvelope) -> KeystoreResponsePayload:
    keystores = None
    if envelope.has_body():
        kura_keystores = decoder.read_json_body_as(envelope.body, KuraKeystores, envelope.charset)
        keystores = [translate_keystore(k) for k in kura_keystores.root]
    return KeystoreResponsePayload(**envelope.payload_fields(), keystores=keystores)


def translate_keystore_items_body(envelope: ResponseEnvelope) -> KeystoreResponsePayload:
    items = None
    if envelope.has_body():
        kura_items = decoder.read_json_body_as(envelope.body, KuraKeystoreItems, envelope.charset)
        items = [translate_keystore_item(i) for i in kura_items.root]
    return KeystoreResponsePayload(**envelope.payload_fields(), keystore_items=items)


def translate_keystore_item_body(envelope: ResponseEnvelope) -> KeystoreResponsePayload:
    item = None
    if envelope.has_body():
        kura_item = decoder.read_json_body_as(envelope.body, KuraKeystoreItem, envelope.charset)
        item = translate_keystore_item(kura_item)
    return KeystoreResponsePayload(**envelope.payload_fields(), keystore_item=item)


def translate_keystore_csr_body(envelope: ResponseEnvelope) -> KeystoreResponsePayload:
    csr = None
    if envelope.has_body():
        signing_request = decoder.read_text_body(envelope.body, envelope.charset).strip()
        if not signing_request.startswith(CSR_HEADERS):
            raise PayloadValidationError("signingRequest", "is not a PEM certificate signing request")
        csr = DeviceKeystoreCSR(signing_request=signing_request)
    return KeystoreResponsePayload(**envelope.payload_fields(), csr=csr)
