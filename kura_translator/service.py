# kura_translator/service.py
import logging
from typing import Optional

from kura_translator.models.common import ErrorMessage
from kura_translator.models.device import DeviceMessage
from kura_translator.models.raw import RawDeviceMessage
from kura_translator.mq.kafka_producer import TranslatorKafkaProducer
from kura_translator.translation.exceptions import InvalidPayloadError
from kura_translator.translation.manager import TranslationManager
from kura_translator import config

logger = logging.getLogger(__name__)


class TranslationService:
    """
    Translates raw device messages and hands the results to downstream consumers.

    Translation failures are logged in full, published to the error topic and
    re-raised to the caller. Nothing is retried here.
    """

    def __init__(self, manager: TranslationManager, kafka_producer: Optional[TranslatorKafkaProducer] = None):
        self.manager = manager
        self.kafka_producer = kafka_producer

    def process(self, category: str, raw_message: RawDeviceMessage) -> DeviceMessage:
        try:
            message = self.manager.translate(category, raw_message)
        except InvalidPayloadError as e:
            logger.exception(
                f"[{category}] Failed to translate message from connector '{raw_message.connector_name}' "
                f"on '{raw_message.topic}': {e}"
            )
            self._publish_translation_error(category, e)
            raise

        if self.kafka_producer is not None:
            self.kafka_producer.publish_translated(message)
        logger.info(f"[{category}] Translated message from {message.client_id} ({message.describe()})")
        return message

    def _publish_translation_error(self, category: str, error: InvalidPayloadError):
        if self.kafka_producer is None:
            return
        try:
            error_message = ErrorMessage(
                service=config.SERVICE_NAME,
                error=str(error.cause),
                error_type=type(error.cause).__name__,
                category=category,
                original_message=error.raw_message.to_log_dict(),
            )
            self.kafka_producer.publish_error(error_message)
        except Exception as publish_error:
            logger.error(f"[{category}] Could not publish translation error: {publish_error}")
