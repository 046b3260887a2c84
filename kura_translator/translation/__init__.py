# kura_translator/translation/__init__.py

"""
Translation layer for Kura device replies.

Raw replies from device connectors are turned into the platform's typed
response messages: the connector descriptor is resolved, the generic envelope
translated, then the category body decoded and validated.
"""

from .base import BaseTranslator, ResponseTranslator
from .lifecycle import LifecycleTranslator
from .exceptions import (
    DecodingError,
    InvalidEnvelopeError,
    InvalidPayloadError,
    PayloadValidationError,
    TranslatorError,
    TranslatorNotFoundError,
)
from .factory import TranslatorFactory
from .manager import TranslationManager
from .protocol import LOOKUP_MISS, LookupMiss, ProtocolDescriptorRegistry, default_registry

__all__ = [
    'BaseTranslator',
    'ResponseTranslator',
    'LifecycleTranslator',
    'DecodingError',
    'InvalidEnvelopeError',
    'InvalidPayloadError',
    'PayloadValidationError',
    'TranslatorError',
    'TranslatorNotFoundError',
    'TranslatorFactory',
    'TranslationManager',
    'LOOKUP_MISS',
    'LookupMiss',
    'ProtocolDescriptorRegistry',
    'default_registry',
]
