# kura_translator/translation/base.py
import logging
from abc import ABC, abstractmethod
from typing import Callable, Type

from kura_translator.models.device import DeviceMessage, ResponseMessage, ResponsePayload
from kura_translator.models.raw import RawDeviceMessage
from .envelope import ResponseEnvelope, translate_envelope
from .exceptions import InvalidPayloadError
from .protocol import ProtocolDescriptorRegistry

logger = logging.getLogger(__name__)

BodyTranslator = Callable[[ResponseEnvelope], ResponsePayload]


class BaseTranslator(ABC):
    """Base class for all device message translators."""

    category: str

    @abstractmethod
    def translate(self, raw: RawDeviceMessage) -> DeviceMessage:
        """
        Translate a raw device message into its internal message.

        Raises:
            InvalidPayloadError: for any failure, wrapping the cause and the raw message
        """
        pass


class ResponseTranslator(BaseTranslator):
    """
    Translator for one reply category.

    The generic envelope is translated first, then ``body_translator`` builds
    the category payload from it. Whatever fails in either step is re-raised
    as InvalidPayloadError.
    """

    def __init__(
        self,
        category: str,
        message_type: Type[ResponseMessage],
        body_translator: BodyTranslator,
        registry: ProtocolDescriptorRegistry,
    ):
        self.category = category
        self.message_type = message_type
        self.body_translator = body_translator
        self.registry = registry

    def translate(self, raw: RawDeviceMessage) -> ResponseMessage:
        try:
            envelope = translate_envelope(raw, self.registry)
            payload = self.body_translator(envelope)
            message = self.message_type(
                category=self.category,
                connector_name=raw.connector_name,
                client_id=envelope.channel.client_id,
                channel=envelope.channel,
                response_code=envelope.response_code,
                received_on=raw.received_on,
                sent_on=raw.sent_on,
                payload=payload,
            )
        except Exception as e:
            logger.debug(f"[{self.category}] Translation of '{raw.topic}' failed: {type(e).__name__}: {e}")
            raise InvalidPayloadError(e, raw) from e

        logger.debug(f"[{self.category}] Translated reply from {message.client_id} ({message.response_code.value})")
        return message

    def __repr__(self):
        return f"{self.__class__.__name__}(category={self.category!r}, message_type={self.message_type.__name__})"
