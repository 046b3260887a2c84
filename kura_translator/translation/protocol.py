# kura_translator/translation/protocol.py
"""
Protocol descriptor lookup.

A registry is built once from an ordered list of providers and never changes
afterwards, so it can be shared between any number of translator threads.
"""
import logging
from abc import ABC, abstractmethod
from types import MappingProxyType
from typing import Iterable, Optional, Union

from pydantic import ValidationError

from kura_translator import config
from kura_translator.config_loader import DEFAULT_DESCRIPTORS_PATH, get_descriptor_configs
from kura_translator.models.protocol import ProtocolDescriptor

logger = logging.getLogger(__name__)


class LookupMiss:
    """Result of a lookup for a connector nobody describes."""
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self):
        return False

    def __repr__(self):
        return "LOOKUP_MISS"


LOOKUP_MISS = LookupMiss()


class ProtocolDescriptorProvider(ABC):
    """A provider for ProtocolDescriptor instances."""

    @abstractmethod
    def get_descriptor(self, connector_name: str) -> Optional[ProtocolDescriptor]:
        """Return the descriptor for the connector, or None if this provider has none."""
        pass


class StaticProtocolDescriptorProvider(ProtocolDescriptorProvider):
    """Provider backed by a fixed set of descriptors."""

    def __init__(self, descriptors: Iterable[ProtocolDescriptor]):
        by_name = {}
        for descriptor in descriptors:
            if descriptor.name in by_name:
                logger.warning(f"Duplicate protocol descriptor '{descriptor.name}', keeping the first one")
                continue
            by_name[descriptor.name] = descriptor
        self._descriptors = MappingProxyType(by_name)

    def get_descriptor(self, connector_name: str) -> Optional[ProtocolDescriptor]:
        return self._descriptors.get(connector_name)

    def names(self):
        return tuple(self._descriptors)


class ConfigProtocolDescriptorProvider(StaticProtocolDescriptorProvider):
    """Provider populated from a YAML descriptor file."""

    @classmethod
    def from_file(cls, path: str) -> 'ConfigProtocolDescriptorProvider':
        descriptors = []
        for entry in get_descriptor_configs(path):
            try:
                descriptors.append(ProtocolDescriptor(**entry))
            except (ValidationError, TypeError) as e:
                logger.error(f"Skipping invalid protocol descriptor {entry!r} in {path}: {e}")
        logger.info(f"Loaded {len(descriptors)} protocol descriptor(s) from {path}")
        return cls(descriptors)


class ProtocolDescriptorRegistry:
    """Ordered set of providers; the first one that knows a connector wins."""

    def __init__(self, providers: Iterable[ProtocolDescriptorProvider]):
        self._providers = tuple(providers)

    def lookup(self, connector_name: str) -> Union[ProtocolDescriptor, LookupMiss]:
        for provider in self._providers:
            descriptor = provider.get_descriptor(connector_name)
            if descriptor is not None:
                return descriptor
        logger.debug(f"No protocol descriptor for connector '{connector_name}'")
        return LOOKUP_MISS

    def __contains__(self, connector_name: str) -> bool:
        return self.lookup(connector_name) is not LOOKUP_MISS

    @property
    def providers(self):
        return self._providers


def default_registry(extra_file: Optional[str] = None) -> ProtocolDescriptorRegistry:
    """
    Build the registry used by the service.

    Descriptors from ``extra_file`` (or PROTOCOL_DESCRIPTORS_FILE) take
    precedence over the packaged defaults.
    """
    providers = []
    extra_file = extra_file or config.PROTOCOL_DESCRIPTORS_FILE
    if extra_file:
        providers.append(ConfigProtocolDescriptorProvider.from_file(extra_file))
    providers.append(ConfigProtocolDescriptorProvider.from_file(DEFAULT_DESCRIPTORS_PATH))
    return ProtocolDescriptorRegistry(providers)
