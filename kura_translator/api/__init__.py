# kura_translator/api/__init__.py
from .app import create_app
from .exception_mappers import register_exception_handlers

__all__ = [
    'create_app',
    'register_exception_handlers'
]
