# kura_translator/models/protocol.py
from pydantic import BaseModel, ConfigDict, Field

from kura_translator import config


class ProtocolDescriptor(BaseModel):
    """Framing and decoding conventions of a named device connector."""
    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Connector name, e.g. 'kura-mqtt'")
    transport: str = Field("mqtt", description="Underlying transport (mqtt, amqp, ...)")
    control_prefix: str = Field("$EDC", description="First topic segment of control messages")
    topic_separator: str = Field("/", min_length=1)
    reply_verb: str = Field("REPLY", description="Topic segment marking a response")
    body_encoding: str = Field("json", description="Codec of application bodies; only 'json' is supported")
    charset: str = Field(default_factory=lambda: config.DEFAULT_CHARSET)
