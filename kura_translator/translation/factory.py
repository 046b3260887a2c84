# kura_translator/translation/factory.py
import logging
from typing import Dict, List, Optional, Tuple, Type

from kura_translator.models.device import (
    CommandResponseMessage,
    InventoryResponseMessage,
    KeystoreResponseMessage,
    LifecycleMessage,
    LifecyclePayload,
    LifecyclePhase,
    MissingMessage,
    MissingPayload,
    ResponseMessage,
)
from .base import BaseTranslator, BodyTranslator, ResponseTranslator
from .command.translator import translate_command_body
from .inventory.translator import (
    translate_inventory_bundles_body,
    translate_inventory_containers_body,
    translate_inventory_items_body,
    translate_inventory_packages_body,
)
from .keystore.translator import (
    translate_keystore_csr_body,
    translate_keystore_item_body,
    translate_keystore_items_body,
    translate_keystores_body,
)
from .lifecycle.translator import LifecycleTranslator
from .protocol import ProtocolDescriptorRegistry

logger = logging.getLogger(__name__)

# category tag -> (message variant, body translation)
CATEGORIES: Dict[str, Tuple[Type[ResponseMessage], BodyTranslator]] = {
    "keystore.keystores": (KeystoreResponseMessage, translate_keystores_body),
    "keystore.items": (KeystoreResponseMessage, translate_keystore_items_body),
    "keystore.item": (KeystoreResponseMessage, translate_keystore_item_body),
    "keystore.csr": (KeystoreResponseMessage, translate_keystore_csr_body),
    "inventory.items": (InventoryResponseMessage, translate_inventory_items_body),
    "inventory.bundles": (InventoryResponseMessage, translate_inventory_bundles_body),
    "inventory.containers": (InventoryResponseMessage, translate_inventory_containers_body),
    "inventory.packages": (InventoryResponseMessage, translate_inventory_packages_body),
    "command.exec": (CommandResponseMessage, translate_command_body),
}

# category tag -> (message variant, payload variant, phase)
LIFECYCLE_CATEGORIES: Dict[str, Tuple[Type[LifecycleMessage], Type[LifecyclePayload], LifecyclePhase]] = {
    "lifecycle.missing": (MissingMessage, MissingPayload, LifecyclePhase.MISSING),
}


class TranslatorFactory:
    """Factory for creating translator instances by category."""

    @staticmethod
    def create_translator(category: str, registry: ProtocolDescriptorRegistry) -> Optional[BaseTranslator]:
        """
        Create the translator for a message category.

        Args:
            category: Category tag, e.g. "keystore.item"
            registry: Protocol descriptor registry shared by all translators

        Returns:
            Translator instance or None if the category is not supported
        """
        if category in CATEGORIES:
            message_type, body_translator = CATEGORIES[category]
            logger.debug(f"Creating translator for category: {category}")
            return ResponseTranslator(category, message_type, body_translator, registry)

        if category in LIFECYCLE_CATEGORIES:
            message_type, payload_type, phase = LIFECYCLE_CATEGORIES[category]
            logger.debug(f"Creating lifecycle translator for category: {category}")
            return LifecycleTranslator(category, message_type, payload_type, phase, registry)

        logger.error(f"Unknown translator category: {category}")
        return None

    @staticmethod
    def create_all(registry: ProtocolDescriptorRegistry) -> List[BaseTranslator]:
        """Create one translator per supported category."""
        categories = list(CATEGORIES) + list(LIFECYCLE_CATEGORIES)
        return [TranslatorFactory.create_translator(category, registry) for category in categories]
