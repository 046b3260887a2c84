# kura_translator/translation/manager.py
import logging
from types import MappingProxyType
from typing import Iterable, Optional, Tuple

from kura_translator.models.device import DeviceMessage
from kura_translator.models.raw import RawDeviceMessage
from .base import BaseTranslator
from .exceptions import TranslatorNotFoundError
from .factory import TranslatorFactory
from .protocol import ProtocolDescriptorRegistry

logger = logging.getLogger(__name__)


class TranslationManager:
    """Dispatches raw device messages to the translator registered for their category."""

    def __init__(self, translators: Iterable[BaseTranslator]):
        table = {}
        for translator in translators:
            if translator.category in table:
                raise ValueError(f"Duplicate translator for category '{translator.category}'")
            table[translator.category] = translator
        self._translators = MappingProxyType(table)
        logger.info(f"TranslationManager initialized with {len(table)} translator(s)")

    @classmethod
    def create(cls, registry: ProtocolDescriptorRegistry) -> 'TranslationManager':
        """Manager with a translator for every supported category."""
        return cls(TranslatorFactory.create_all(registry))

    def get_translator(self, category: str) -> Optional[BaseTranslator]:
        return self._translators.get(category)

    def translate(self, category: str, raw_message: RawDeviceMessage) -> DeviceMessage:
        """
        Translate a raw message with the translator of ``category``.

        Raises:
            TranslatorNotFoundError: if no translator handles the category
            InvalidPayloadError: if the translator rejects the message
        """
        translator = self.get_translator(category)
        if translator is None:
            raise TranslatorNotFoundError(category)
        logger.debug(f"Using translator: {translator!r}")
        return translator.translate(raw_message)

    def categories(self) -> Tuple[str, ...]:
        return tuple(sorted(self._translators))

    def get_translator_count(self) -> int:
        """Get the number of registered translators."""
        return len(self._translators)
