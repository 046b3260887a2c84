# kura_translator/translation/lifecycle/__init__.py

from .translator import LifecycleTranslator, translate_lifecycle_channel

__all__ = [
    'LifecycleTranslator',
    'translate_lifecycle_channel'
]
