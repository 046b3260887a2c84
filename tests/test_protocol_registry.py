"""
Tests for protocol descriptor lookup.
"""

import pytest

from kura_translator.models.protocol import ProtocolDescriptor
from kura_translator.translation.protocol import (
    LOOKUP_MISS,
    ConfigProtocolDescriptorProvider,
    LookupMiss,
    ProtocolDescriptorRegistry,
    StaticProtocolDescriptorProvider,
    default_registry,
)


def test_lookup_known_connector(registry):
    descriptor = registry.lookup("kura-mqtt")
    assert isinstance(descriptor, ProtocolDescriptor)
    assert descriptor.name == "kura-mqtt"
    assert descriptor.control_prefix == "$EDC"


def test_lookup_is_idempotent(registry):
    assert registry.lookup("kura-mqtt") == registry.lookup("kura-mqtt")
    assert registry.lookup("kura-mqtt") is registry.lookup("kura-mqtt")


@pytest.mark.parametrize("name", ["unknown", "", "KURA-MQTT"])
def test_unknown_connector_returns_sentinel(registry, name):
    result = registry.lookup(name)
    assert result is LOOKUP_MISS
    assert not result
    assert name not in registry


def test_lookup_miss_is_singleton():
    assert LookupMiss() is LOOKUP_MISS
    assert repr(LOOKUP_MISS) == "LOOKUP_MISS"


def test_first_provider_wins():
    first = StaticProtocolDescriptorProvider([ProtocolDescriptor(name="kura-mqtt", charset="iso-8859-1")])
    second = StaticProtocolDescriptorProvider([
        ProtocolDescriptor(name="kura-mqtt"),
        ProtocolDescriptor(name="other"),
    ])
    registry = ProtocolDescriptorRegistry([first, second])

    assert registry.lookup("kura-mqtt").charset == "iso-8859-1"
    assert registry.lookup("other").name == "other"


def test_duplicate_descriptor_keeps_first():
    provider = StaticProtocolDescriptorProvider([
        ProtocolDescriptor(name="dup", transport="mqtt"),
        ProtocolDescriptor(name="dup", transport="amqp"),
    ])
    assert provider.get_descriptor("dup").transport == "mqtt"
    assert provider.names() == ("dup",)


def test_descriptors_are_immutable(registry):
    descriptor = registry.lookup("kura-mqtt")
    with pytest.raises(Exception):
        descriptor.charset = "ascii"


def test_config_provider_from_file(tmp_path):
    path = tmp_path / "descriptors.yaml"
    path.write_text(
        "protocol_descriptors:\n"
        "  - name: custom-mqtt\n"
        "    control_prefix: $KAPUA\n"
        "  - transport: mqtt\n"  # missing name, skipped
    )
    provider = ConfigProtocolDescriptorProvider.from_file(str(path))

    assert provider.names() == ("custom-mqtt",)
    assert provider.get_descriptor("custom-mqtt").control_prefix == "$KAPUA"


def test_config_provider_missing_file(tmp_path):
    provider = ConfigProtocolDescriptorProvider.from_file(str(tmp_path / "missing.yaml"))
    assert provider.names() == ()


def test_default_registry_ships_kura_mqtt():
    registry = default_registry()
    assert registry.lookup("kura-mqtt").transport == "mqtt"
    assert registry.lookup("kura-amqp").topic_separator == "."
    assert registry.lookup("nope") is LOOKUP_MISS


def test_default_registry_extra_file_takes_precedence(tmp_path):
    path = tmp_path / "descriptors.yaml"
    path.write_text("protocol_descriptors:\n  - name: kura-mqtt\n    charset: utf-16\n")

    registry = default_registry(str(path))

    assert registry.lookup("kura-mqtt").charset == "utf-16"
    assert registry.lookup("kura-mqtts").charset == "utf-8"
