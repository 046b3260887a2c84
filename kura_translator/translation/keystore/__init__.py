# kura_translator/translation/keystore/__init__.py

"""Translation of Kura keystore application replies."""

from .translator import (
    translate_keystore_csr_body,
    translate_keystore_item_body,
    translate_keystore_items_body,
    translate_keystores_body,
)

__all__ = [
    'translate_keystore_csr_body',
    'translate_keystore_item_body',
    'translate_keystore_items_body',
    'translate_keystores_body',
]
