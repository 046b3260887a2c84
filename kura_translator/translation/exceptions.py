# kura_translator/translation/exceptions.py
from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from kura_translator.models.raw import RawDeviceMessage


class TranslatorError(Exception):
    """Base class for all translation layer errors."""
    error_code = "TRANSLATOR_ERROR"


class DecodingError(TranslatorError):
    """Raised when body bytes do not match the expected shape."""
    error_code = "DECODING_ERROR"

    def __init__(self, message: str, body: Optional[bytes]):
        super().__init__(message)
        self.body = body


class PayloadValidationError(TranslatorError):
    """Raised when a decoded body violates category-specific rules."""
    error_code = "PAYLOAD_VALIDATION_ERROR"

    def __init__(self, field: str, reason: str):
        super().__init__(f"Invalid value for '{field}': {reason}")
        self.field = field
        self.reason = reason


class InvalidEnvelopeError(TranslatorError):
    """Raised when the generic reply envelope (descriptor, topic, response code) is unusable."""
    error_code = "INVALID_ENVELOPE"


class InvalidPayloadError(TranslatorError):
    """
    The only error a translator lets out.

    Wraps whatever went wrong while translating and keeps the raw message
    that could not be translated.
    """
    error_code = "INVALID_PAYLOAD"

    def __init__(self, cause: BaseException, raw_message: 'RawDeviceMessage'):
        super().__init__(f"Invalid payload received on '{raw_message.topic}': {cause}")
        self.cause = cause
        self.raw_message = raw_message


class TranslatorNotFoundError(TranslatorError):
    """Raised when no translator is registered for a category."""
    error_code = "TRANSLATOR_NOT_FOUND"

    def __init__(self, category: str):
        super().__init__(f"No translator registered for category '{category}'")
        self.category = category
