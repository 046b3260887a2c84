"""
Shared fixtures for translator tests.
"""

import pytest

from kura_translator.models.protocol import ProtocolDescriptor
from kura_translator.models.raw import RawDeviceMessage
from kura_translator.translation.manager import TranslationManager
from kura_translator.translation.protocol import (
    ProtocolDescriptorRegistry,
    StaticProtocolDescriptorProvider,
)

KEYSTORE_TOPIC = "$EDC/acme/gw-1/KEYS-V1/REPLY/req-1"
INVENTORY_TOPIC = "$EDC/acme/gw-1/INVENTORY-V1/REPLY/req-2"
COMMAND_TOPIC = "$EDC/acme/gw-1/CMD-V1/REPLY/req-3"
MISSING_TOPIC = "$EDC/acme/gw-1/MQTT/MISSING"


class FakeProducer:
    """Stands in for a confluent-kafka Producer."""

    def __init__(self):
        self.produced = []

    def produce(self, topic, value=None, key=None, callback=None):
        self.produced.append((topic, value, key))

    def poll(self, timeout):
        return 0

    def flush(self, timeout=None):
        return 0


@pytest.fixture
def registry():
    return ProtocolDescriptorRegistry([
        StaticProtocolDescriptorProvider([
            ProtocolDescriptor(name="kura-mqtt"),
            ProtocolDescriptor(name="kura-amqp", transport="amqp", topic_separator="."),
        ])
    ])


@pytest.fixture
def manager(registry):
    return TranslationManager.create(registry)


@pytest.fixture
def make_raw():
    """Build a RawDeviceMessage with sensible defaults."""
    def _make(body=None, topic=KEYSTORE_TOPIC, connector_name="kura-mqtt", metrics=None):
        if isinstance(body, str):
            body = body.encode("utf-8")
        return RawDeviceMessage(
            connector_name=connector_name,
            topic=topic,
            body=body,
            metrics=metrics if metrics is not None else {"response.code": 200},
        )
    return _make


@pytest.fixture
def fake_producer():
    return FakeProducer()
