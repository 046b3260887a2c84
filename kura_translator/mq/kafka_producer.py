# kura_translator/mq/kafka_producer.py
import logging

from confluent_kafka import KafkaException

from kura_translator import config
from kura_translator.models.common import ErrorMessage
from kura_translator.models.device import DeviceMessage
from .kafka_helpers import create_kafka_producer, publish_message

logger = logging.getLogger(__name__)


class TranslatorKafkaProducer:
    """
    A wrapper around a confluent-kafka Producer for the translator.
    Handles publishing translated DeviceMessages and ErrorMessages to the correct topics.
    """
    def __init__(self, producer, translated_topic: str = None, error_topic: str = None):
        self.producer = producer
        self.translated_topic = translated_topic or config.KAFKA_TRANSLATED_TOPIC
        self.error_topic = config.KAFKA_ERROR_TOPIC if error_topic is None else error_topic
        logger.info("TranslatorKafkaProducer initialized.")

    @classmethod
    def create(cls, bootstrap_servers: str, **config_overrides):
        """Create a TranslatorKafkaProducer with a new Producer instance."""
        producer = create_kafka_producer(bootstrap_servers, **config_overrides)
        return cls(producer)

    def publish_translated(self, message: DeviceMessage):
        """
        Publishes a translated reply or lifecycle message, keyed by client id.

        Raises:
            KafkaException: If publishing fails due to Kafka-related issues.
        """
        if not isinstance(message, DeviceMessage):
            raise TypeError("Message must be an instance of DeviceMessage")

        topic = self.translated_topic
        try:
            logger.debug(f"Publishing {message.category} message from {message.client_id} to topic '{topic}'")
            publish_message(self.producer, topic, message.model_dump(mode="json"), message.client_id)
        except KafkaException as e:
            logger.error(f"Failed to publish {message.category} message to Kafka topic '{topic}': {e}")
            raise

    def publish_error(self, message: ErrorMessage):
        """
        Publishes an ErrorMessage to the configured error topic.

        Raises:
            KafkaException: If publishing fails due to Kafka-related issues.
        """
        if not isinstance(message, ErrorMessage):
            raise TypeError("Message must be an instance of ErrorMessage")

        if not self.error_topic:
            logger.warning(f"[{message.request_id}] KAFKA_ERROR_TOPIC not configured. Skipping error publication.")
            return

        topic = self.error_topic
        try:
            logger.debug(f"[{message.request_id}] Publishing ErrorMessage to topic '{topic}'")
            publish_message(self.producer, topic, message.model_dump(mode="json"), message.request_id)
        except KafkaException as e:
            logger.error(f"[{message.request_id}] Failed to publish ErrorMessage to Kafka topic '{topic}': {e}")
            raise

    def close(self, timeout: float = 10.0):
        """Flush pending messages."""
        remaining = self.producer.flush(timeout)
        if remaining:
            logger.warning(f"{remaining} message(s) still undelivered after flush")
