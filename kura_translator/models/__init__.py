# kura_translator/models/__init__.py
from .common import CustomBaseModel, ErrorMessage, generate_request_id
from .protocol import ProtocolDescriptor
from .raw import RawDeviceMessage

__all__ = [
    'CustomBaseModel',
    'ErrorMessage',
    'generate_request_id',
    'ProtocolDescriptor',
    'RawDeviceMessage',
]
