# kura_translator/translation/inventory/__init__.py

"""Translation of Kura inventory application replies."""

from .translator import (
    translate_inventory_bundles_body,
    translate_inventory_containers_body,
    translate_inventory_items_body,
    translate_inventory_packages_body,
)

__all__ = [
    'translate_inventory_bundles_body',
    'translate_inventory_containers_body',
    'translate_inventory_items_body',
    'translate_inventory_packages_body',
]
