# kura_translator/translation/lifecycle/translator.py
"""
Lifecycle notification translation.

Lifecycle messages are not replies to a request. The broker publishes them on
the device's behalf, e.g. when its connection drops without a disconnect::

    $EDC/{account}/{clientId}/MQTT/MISSING

There is no response code and no application segment, so the reply envelope
does not apply. Only the descriptor resolution is shared with replies.
"""
import logging
from typing import Type

from kura_translator.models.device import LifecycleChannel, LifecycleMessage, LifecyclePayload, LifecyclePhase
from kura_translator.models.protocol import ProtocolDescriptor
from kura_translator.models.raw import RawDeviceMessage
from ..base import BaseTranslator
from ..envelope import resolve_descriptor
from ..exceptions import InvalidEnvelopeError, InvalidPayloadError
from ..protocol import ProtocolDescriptorRegistry

logger = logging.getLogger(__name__)

LIFECYCLE_APP = "MQTT"


def translate_lifecycle_channel(topic: str, descriptor: ProtocolDescriptor, phase: LifecyclePhase) -> LifecycleChannel:
    parts = topic.split(descriptor.topic_separator)
    if len(parts) != 5:
        raise InvalidEnvelopeError(f"Lifecycle topic '{topic}' must have exactly 5 segments")

    prefix, account, client_id, app, verb = parts
    if prefix != descriptor.control_prefix:
        raise InvalidEnvelopeError(
            f"Lifecycle topic '{topic}' does not start with '{descriptor.control_prefix}'"
        )
    if app != LIFECYCLE_APP or verb != phase.value:
        raise InvalidEnvelopeError(f"Topic '{topic}' is not a {phase.value} notification")
    if not account or not client_id:
        raise InvalidEnvelopeError(f"Lifecycle topic '{topic}' has an empty account or client id")

    return LifecycleChannel(account=account, client_id=client_id, phase=phase)


class LifecycleTranslator(BaseTranslator):
    """Translator for one lifecycle phase, with the same failure wrapping as replies."""

    def __init__(
        self,
        category: str,
        message_type: Type[LifecycleMessage],
        payload_type: Type[LifecyclePayload],
        phase: LifecyclePhase,
        registry: ProtocolDescriptorRegistry,
    ):
        self.category = category
        self.message_type = message_type
        self.payload_type = payload_type
        self.phase = phase
        self.registry = registry

    def translate(self, raw: RawDeviceMessage) -> LifecycleMessage:
        try:
            descriptor = resolve_descriptor(raw, self.registry)
            channel = translate_lifecycle_channel(raw.topic, descriptor, self.phase)
            message = self.message_type(
                category=self.category,
                connector_name=raw.connector_name,
                client_id=channel.client_id,
                channel=channel,
                received_on=raw.received_on,
                sent_on=raw.sent_on,
                payload=self.payload_type(metrics=dict(raw.metrics), body=raw.body or None),
            )
        except Exception as e:
            logger.debug(f"[{self.category}] Translation of '{raw.topic}' failed: {type(e).__name__}: {e}")
            raise InvalidPayloadError(e, raw) from e

        logger.debug(f"[{self.category}] Device {message.client_id} reported {self.phase.value}")
        return message

    def __repr__(self):
        return f"{self.__class__.__name__}(category={self.category!r}, phase={self.phase.value})"
