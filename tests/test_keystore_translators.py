"""
Tests for keystore reply translation.
"""

import json
from datetime import datetime, timezone

import pytest

from kura_translator.models.device import KeystoreResponseMessage, ResponseCode
from kura_translator.translation import decoder
from kura_translator.translation.exceptions import (
    DecodingError,
    InvalidEnvelopeError,
    InvalidPayloadError,
    PayloadValidationError,
)

CSR = "-----BEGIN CERTIFICATE REQUEST-----\nMIIB\n-----END CERTIFICATE REQUEST-----\n"


def test_keystore_item_is_translated(manager, make_raw):
    raw = make_raw('{"alias":"mykey","size":2048}')

    message = manager.translate("keystore.item", raw)

    assert isinstance(message, KeystoreResponseMessage)
    assert message.category == "keystore.item"
    assert message.connector_name == "kura-mqtt"
    assert message.client_id == "gw-1"
    assert message.response_code == ResponseCode.ACCEPTED
    assert message.payload.has_item
    assert message.payload.keystore_item.alias == "mykey"
    assert message.payload.keystore_item.size == 2048


def test_keystore_item_full_shape(manager, make_raw):
    body = {
        "keystoreServicePid": "SSLKeystore",
        "alias": "mykey",
        "type": "TRUSTED_CERTIFICATE",
        "size": 2048,
        "algorithm": "RSA",
        "subjectDN": "CN=device",
        "subjectAN": [{"type": "DNS", "value": "device.local"}],
        "issuer": "CN=ca",
        "startDate": 1600000000000,
        "expirationDate": 1700000000000,
        "certificate": "-----BEGIN CERTIFICATE-----",
        "certificateChain": ["A", "B"],
    }
    item = manager.translate("keystore.item", make_raw(json.dumps(body))).payload.keystore_item

    assert item.keystore_id == "SSLKeystore"
    assert item.item_type == "TRUSTED_CERTIFICATE"
    assert item.algorithm == "RSA"
    assert item.subject_dn == "CN=device"
    assert item.subject_an[0].an_type == "DNS"
    assert item.subject_an[0].value == "device.local"
    assert item.issuer == "CN=ca"
    assert item.not_before == datetime.fromtimestamp(1600000000, tz=timezone.utc)
    assert item.not_after == datetime.fromtimestamp(1700000000, tz=timezone.utc)
    assert item.certificate_chain == ["A", "B"]


def test_no_body_gives_empty_payload(manager, make_raw):
    message = manager.translate("keystore.item", make_raw(None))

    assert message.payload.has_item is False
    assert message.payload.keystore_item is None
    assert not message.payload.has_items
    assert not message.payload.has_keystores
    assert not message.payload.has_csr


@pytest.mark.parametrize("category", ["keystore.keystores", "keystore.items", "keystore.item", "keystore.csr"])
@pytest.mark.parametrize("body", [None, b""])
def test_no_body_never_decodes(manager, make_raw, monkeypatch, category, body):
    def fail(*args, **kwargs):
        raise AssertionError("decoder must not be called without a body")

    monkeypatch.setattr(decoder, "read_json_body_as", fail)
    monkeypatch.setattr(decoder, "read_text_body", fail)

    message = manager.translate(category, make_raw(body))
    assert message.payload.keystore_item is None


def test_wrong_type_is_wrapped(manager, make_raw):
    raw = make_raw('{"alias": 123}')

    with pytest.raises(InvalidPayloadError) as exc_info:
        manager.translate("keystore.item", raw)

    error = exc_info.value
    assert error.raw_message == raw
    assert isinstance(error.cause, DecodingError)
    assert error.cause.body == raw.body
    assert "string_type" in {e["type"] for e in error.cause.__cause__.errors()}


def test_missing_alias_is_wrapped(manager, make_raw):
    raw = make_raw('{"size": 2048}')
    with pytest.raises(InvalidPayloadError) as exc_info:
        manager.translate("keystore.item", raw)
    assert isinstance(exc_info.value.cause, DecodingError)
    assert exc_info.value.raw_message is raw


@pytest.mark.parametrize("body, field", [
    ({"alias": "  "}, "alias"),
    ({"alias": "k", "size": -1}, "size"),
    ({"alias": "k", "certificateChain": ["A", ""]}, "certificateChain"),
    ({"alias": "k", "startDate": 2, "expirationDate": 1}, "startDate"),
])
def test_item_validation_is_wrapped(manager, make_raw, body, field):
    with pytest.raises(InvalidPayloadError) as exc_info:
        manager.translate("keystore.item", make_raw(json.dumps(body)))

    cause = exc_info.value.cause
    assert isinstance(cause, PayloadValidationError)
    assert cause.field == field


def test_keystores_list(manager, make_raw):
    body = '[{"keystoreServicePid":"SSLKeystore","type":"jks","size":3},{"keystoreServicePid":"HttpsKeystore"}]'
    payload = manager.translate("keystore.keystores", make_raw(body)).payload

    assert payload.has_keystores
    assert [k.id for k in payload.keystores] == ["SSLKeystore", "HttpsKeystore"]
    assert payload.keystores[0].keystore_type == "jks"
    assert payload.keystores[1].size is None


def test_empty_keystores_list_is_present(manager, make_raw):
    payload = manager.translate("keystore.keystores", make_raw("[]")).payload
    assert payload.has_keystores
    assert payload.keystores == []


def test_keystore_with_empty_pid_is_rejected(manager, make_raw):
    with pytest.raises(InvalidPayloadError) as exc_info:
        manager.translate("keystore.keystores", make_raw('[{"keystoreServicePid":""}]'))
    assert isinstance(exc_info.value.cause, PayloadValidationError)


def test_keystore_items_list(manager, make_raw):
    body = '[{"alias":"a","size":1024},{"alias":"b"}]'
    payload = manager.translate("keystore.items", make_raw(body)).payload

    assert payload.has_items
    assert [i.alias for i in payload.keystore_items] == ["a", "b"]
    assert not payload.has_item


def test_csr(manager, make_raw):
    payload = manager.translate("keystore.csr", make_raw(CSR)).payload
    assert payload.has_csr
    assert payload.csr.signing_request == CSR.strip()


def test_csr_rejects_non_pem(manager, make_raw):
    with pytest.raises(InvalidPayloadError) as exc_info:
        manager.translate("keystore.csr", make_raw("not a csr"))
    assert isinstance(exc_info.value.cause, PayloadValidationError)


def test_envelope_failure_is_wrapped_the_same_way(manager, make_raw):
    raw = make_raw('{"alias":"mykey"}', connector_name="unknown-connector")

    with pytest.raises(InvalidPayloadError) as exc_info:
        manager.translate("keystore.item", raw)

    assert isinstance(exc_info.value.cause, InvalidEnvelopeError)
    assert exc_info.value.raw_message == raw


def test_error_reply_keeps_exception_details(manager, make_raw):
    raw = make_raw(None, metrics={
        "response.code": 500,
        "response.exception.message": "Keystore not found",
        "response.exception.stack": "java.lang.IllegalArgumentException...",
    })
    message = manager.translate("keystore.item", raw)

    assert message.response_code == ResponseCode.INTERNAL_ERROR
    assert message.payload.exception_message == "Keystore not found"
    assert message.payload.exception_stack.startswith("java.lang")
    assert not message.payload.has_item


def test_translation_is_repeatable(manager, make_raw):
    raw = make_raw('{"alias":"mykey","size":2048}')
    assert manager.translate("keystore.item", raw) == manager.translate("keystore.item", raw)
