# kura_translator/mq/kafka_helpers.py
import json
import logging
import time
from datetime import datetime
from typing import Any, Dict, Optional

from confluent_kafka import Producer, KafkaException

logger = logging.getLogger(__name__)
logging.getLogger("confluent_kafka").setLevel(logging.WARNING)


class DateTimeEncoder(json.JSONEncoder):
    """Custom JSON encoder that handles datetime objects."""
    def default(self, obj):
        if isinstance(obj, datetime):
            return obj.isoformat()
        elif isinstance(obj, bytes):
            return obj.hex()
        return super().default(obj)


def get_producer_config(**overrides) -> Dict[str, Any]:
    """Get producer configuration for confluent-kafka."""
    config = {
        'bootstrap.servers': '',  # Will be set later
        'acks': 'all',
        'retries': 10,
        'request.timeout.ms': 120000,
        'delivery.timeout.ms': 300000,
        'socket.keepalive.enable': True,
        'security.protocol': 'PLAINTEXT',
        'client.id': 'kura_translator_producer',
        'statistics.interval.ms': 0,
    }
    config.update(overrides)
    return config


def create_kafka_producer(bootstrap_servers: str, max_attempts: int = 5, base_delay: float = 1,
                          **config_overrides) -> Producer:
    """
    Creates a confluent-kafka Producer, retrying with exponential backoff.

    Raises:
        KafkaException: if the producer still cannot be created after max_attempts
    """
    config = get_producer_config(**config_overrides)
    config['bootstrap.servers'] = bootstrap_servers

    for attempt in range(1, max_attempts + 1):
        try:
            logger.debug(f"Creating Producer with config: {config}")
            producer = Producer(config)
            logger.info(f"Kafka Producer connected to {bootstrap_servers}")
            return producer
        except KafkaException as e:
            if attempt == max_attempts:
                logger.error(f"Giving up creating Kafka Producer after {attempt} attempts: {e}")
                raise
            delay = base_delay * (2 ** min(attempt - 1, 6))
            logger.error(f"Kafka error creating producer (attempt {attempt}): {e}")
            logger.info(f"Retrying in {delay} seconds...")
            time.sleep(delay)


def publish_message(producer: Producer, topic: str, value: dict, key: Optional[str] = None):
    """Publishes a JSON message to a Kafka topic."""
    try:
        value_bytes = json.dumps(value, cls=DateTimeEncoder).encode('utf-8')
        key_bytes = key.encode('utf-8') if key else None

        def delivery_report(err, msg):
            if err is not None:
                logger.error(f'Message delivery failed for topic {topic}: {err}')
            else:
                logger.debug(f'Message delivered to {msg.topic()} [{msg.partition()}] at offset {msg.offset()}')

        producer.produce(topic, value=value_bytes, key=key_bytes, callback=delivery_report)
        # Trigger delivery callbacks (non-blocking)
        producer.poll(0)

    except Exception as e:
        logger.error(f"Failed to send message to Kafka topic '{topic}': {e}")
        raise
