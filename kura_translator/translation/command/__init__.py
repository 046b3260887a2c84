# kura_translator/translation/command/__init__.py

from .translator import translate_command_body

__all__ = [
    'translate_command_body'
]
