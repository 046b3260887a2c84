# kura_translator/translation/envelope.py
"""
Generic reply envelope translation.

Every category starts here: the connector descriptor is resolved, the reply
topic is split into its channel parts and the response metrics common to all
Kura replies are mapped. Category translators then only deal with the body.

Reply topics look like::

    $EDC/{account}/{clientId}/{APP}-{VERSION}/REPLY/{requestId}[/{more}...]
"""
import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

from kura_translator.models.device import ResponseChannel, ResponseCode
from kura_translator.models.protocol import ProtocolDescriptor
from kura_translator.models.raw import RawDeviceMessage
from .exceptions import InvalidEnvelopeError
from .protocol import LOOKUP_MISS, ProtocolDescriptorRegistry

logger = logging.getLogger(__name__)

RESPONSE_CODE_METRIC = "response.code"
EXCEPTION_MESSAGE_METRIC = "response.exception.message"
EXCEPTION_STACK_METRIC = "response.exception.stack"

KURA_RESPONSE_CODES = {
    200: ResponseCode.ACCEPTED,
    400: ResponseCode.BAD_REQUEST,
    404: ResponseCode.NOT_FOUND,
    500: ResponseCode.INTERNAL_ERROR,
}

SUPPORTED_BODY_ENCODINGS = frozenset({"json"})

_ENVELOPE_METRICS = (RESPONSE_CODE_METRIC, EXCEPTION_MESSAGE_METRIC, EXCEPTION_STACK_METRIC)


@dataclass(frozen=True)
class ResponseEnvelope:
    """Result of the generic translation step."""
    descriptor: ProtocolDescriptor
    channel: ResponseChannel
    response_code: ResponseCode
    exception_message: Optional[str]
    exception_stack: Optional[str]
    metrics: Dict[str, Any]
    raw: RawDeviceMessage

    @property
    def body(self) -> Optional[bytes]:
        return self.raw.body

    @property
    def charset(self) -> str:
        return self.descriptor.charset

    def has_body(self) -> bool:
        return self.raw.has_body()

    def payload_fields(self) -> Dict[str, Any]:
        """Keyword arguments for the ResponsePayload part of any category payload."""
        return {
            "exception_message": self.exception_message,
            "exception_stack": self.exception_stack,
            "metrics": dict(self.metrics),
        }


def translate_channel(topic: str, descriptor: ProtocolDescriptor) -> ResponseChannel:
    parts = topic.split(descriptor.topic_separator)
    if len(parts) < 5:
        raise InvalidEnvelopeError(f"Reply topic '{topic}' has too few segments")

    prefix, account, client_id, app, verb, *rest = parts
    if prefix != descriptor.control_prefix:
        raise InvalidEnvelopeError(
            f"Reply topic '{topic}' does not start with '{descriptor.control_prefix}'"
        )
    if verb != descriptor.reply_verb:
        raise InvalidEnvelopeError(f"Topic '{topic}' is not a reply (expected '{descriptor.reply_verb}')")
    if not account or not client_id:
        raise InvalidEnvelopeError(f"Reply topic '{topic}' has an empty account or client id")

    app_name, sep, app_version = app.rpartition("-")
    if not sep or not app_name or not app_version:
        raise InvalidEnvelopeError(f"Application segment '{app}' is not in APP-VERSION form")

    return ResponseChannel(
        account=account,
        client_id=client_id,
        app_name=app_name,
        app_version=app_version,
        verb=verb,
        request_id=rest[0] if rest else None,
        semantic_parts=rest[1:],
    )


def _response_code_number(code: Any) -> int:
    if isinstance(code, bool):
        raise InvalidEnvelopeError(f"Response code {code!r} is not a number")
    if isinstance(code, int):
        return code
    if isinstance(code, float) and code.is_integer():
        return int(code)
    if isinstance(code, str) and code.strip().isdecimal():
        return int(code)
    raise InvalidEnvelopeError(f"Response code {code!r} is not an integer")


def translate_response_code(metrics: Dict[str, Any]) -> ResponseCode:
    code = metrics.get(RESPONSE_CODE_METRIC)
    if code is None:
        return ResponseCode.ACCEPTED
    code = _response_code_number(code)

    response_code = KURA_RESPONSE_CODES.get(code)
    if response_code is None:
        raise InvalidEnvelopeError(f"Unsupported response code: {code}")
    return response_code


def _optional_str(metrics: Dict[str, Any], name: str) -> Optional[str]:
    value = metrics.get(name)
    return None if value is None else str(value)


def resolve_descriptor(raw: RawDeviceMessage, registry: ProtocolDescriptorRegistry) -> ProtocolDescriptor:
    descriptor = registry.lookup(raw.connector_name)
    if descriptor is LOOKUP_MISS:
        raise InvalidEnvelopeError(f"No protocol descriptor for connector '{raw.connector_name}'")
    if descriptor.body_encoding not in SUPPORTED_BODY_ENCODINGS:
        raise InvalidEnvelopeError(
            f"Connector '{descriptor.name}' uses unsupported body encoding '{descriptor.body_encoding}'"
        )
    return descriptor


def translate_envelope(raw: RawDeviceMessage, registry: ProtocolDescriptorRegistry) -> ResponseEnvelope:
    """
    Translate the parts of a reply shared by every category.

    Raises:
        InvalidEnvelopeError: unknown connector, unsupported body encoding,
            malformed topic or response code
    """
    descriptor = resolve_descriptor(raw, registry)
    channel = translate_channel(raw.topic, descriptor)
    response_code = translate_response_code(raw.metrics)
    metrics = {k: v for k, v in raw.metrics.items() if k not in _ENVELOPE_METRICS}

    logger.debug(
        f"Translated envelope from {channel.client_id}: app={channel.app_name}-{channel.app_version}, "
        f"code={response_code.value}, body={'yes' if raw.has_body() else 'no'}"
    )
    return ResponseEnvelope(
        descriptor=descriptor,
        channel=channel,
        response_code=response_code,
        exception_message=_optional_str(raw.metrics, EXCEPTION_MESSAGE_METRIC),
        exception_stack=_optional_str(raw.metrics, EXCEPTION_STACK_METRIC),
        metrics=metrics,
        raw=raw,
    )
