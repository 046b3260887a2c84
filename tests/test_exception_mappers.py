"""
Tests for the HTTP boundary and its exception mapping.
"""

import logging

import pytest
from fastapi.testclient import TestClient

from kura_translator.api.app import create_app
from kura_translator.api.exception_mappers import INTERNAL_SERVER_ERROR_MESSAGE
from kura_translator.service import TranslationService
from kura_translator.translation.exceptions import InvalidPayloadError
from tests.conftest import KEYSTORE_TOPIC


@pytest.fixture
def client(manager):
    return TestClient(create_app(TranslationService(manager)))


def _request(body: bytes = None, **overrides):
    request = {
        "connector_name": "kura-mqtt",
        "topic": KEYSTORE_TOPIC,
        "body_hex": body.hex() if body is not None else None,
        "metrics": {"response.code": 200},
    }
    request.update(overrides)
    return request


def test_translate_endpoint(client):
    response = client.post("/translate/keystore.item", json=_request(b'{"alias":"mykey","size":2048}'))

    assert response.status_code == 200
    data = response.json()
    assert data["payload"]["keystore_item"]["alias"] == "mykey"
    assert data["response_code"] == "ACCEPTED"
    assert data["channel"]["client_id"] == "gw-1"


def test_invalid_payload_maps_to_500(client, caplog):
    body = b'{"alias": 123}'
    with caplog.at_level(logging.ERROR, logger="kura_translator.api.exception_mappers"):
        response = client.post("/translate/keystore.item", json=_request(body))

    assert response.status_code == 500
    assert response.json() == {
        "type": "exceptionInfo",
        "httpErrorCode": 500,
        "message": INTERNAL_SERVER_ERROR_MESSAGE,
        "errorCode": "INVALID_PAYLOAD",
    }
    assert "Traceback" not in response.text
    assert body.hex() not in response.text

    records = [r for r in caplog.records if r.name == "kura_translator.api.exception_mappers"]
    assert records and records[0].exc_info is not None


def test_envelope_failure_maps_to_500(client):
    response = client.post("/translate/keystore.item", json=_request(None, connector_name="unknown"))
    assert response.status_code == 500
    assert response.json()["errorCode"] == "INVALID_PAYLOAD"


def test_unknown_category_maps_to_404(client):
    response = client.post("/translate/snapshot.ids", json=_request(None))

    assert response.status_code == 404
    data = response.json()
    assert data["httpErrorCode"] == 404
    assert data["errorCode"] == "TRANSLATOR_NOT_FOUND"
    assert "snapshot.ids" in data["message"]


def test_bad_hex_body_is_rejected(client):
    response = client.post("/translate/keystore.item", json=_request(None, body_hex="zz"))
    assert response.status_code == 422


class ExplodingManager:
    def categories(self):
        return ()

    def translate(self, category, raw_message):
        raise RuntimeError("database exploded at /secret/path")


def test_unhandled_exception_maps_to_500():
    app = create_app(TranslationService(ExplodingManager()))
    client = TestClient(app, raise_server_exceptions=False)

    response = client.post("/translate/keystore.item", json=_request(None))

    assert response.status_code == 500
    assert response.json()["message"] == INTERNAL_SERVER_ERROR_MESSAGE
    assert "/secret/path" not in response.text


class RejectingManager:
    """Rejects every request as if it came with byte-array metrics."""

    def __init__(self, raw_message):
        self.raw_message = raw_message

    def categories(self):
        return ()

    def translate(self, category, raw_message):
        raise InvalidPayloadError(ValueError("bad"), self.raw_message)


def test_invalid_payload_with_byte_metrics_maps_to_500(make_raw, caplog):
    raw = make_raw(b"\x01", metrics={"blob": b"\xff\xfe"})
    client = TestClient(create_app(TranslationService(RejectingManager(raw))))

    with caplog.at_level(logging.ERROR, logger="kura_translator.api.exception_mappers"):
        response = client.post("/translate/keystore.item", json=_request(None))

    assert response.status_code == 500
    assert response.json()["errorCode"] == "INVALID_PAYLOAD"
    assert "body=01" in caplog.text
