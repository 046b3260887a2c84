# kura_translator/main.py
import logging

import uvicorn

from kura_translator import config
from kura_translator.api.app import create_app
from kura_translator.mq.kafka_producer import TranslatorKafkaProducer
from kura_translator.service import TranslationService
from kura_translator.translation.manager import TranslationManager
from kura_translator.translation.protocol import default_registry

# Configure logging
log_level = getattr(logging, config.LOG_LEVEL.upper(), logging.INFO)
logging.basicConfig(
    level=log_level,
    format='%(asctime)s - %(name)s - %(levelname)s - %(filename)s:%(lineno)d - %(message)s',
    handlers=[
        logging.StreamHandler()
    ]
)

logging.getLogger("confluent_kafka").setLevel(logging.WARNING)
logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
logging.getLogger("kura_translator.translation").setLevel(log_level)

logger = logging.getLogger(__name__)


def build_service() -> TranslationService:
    """Wire registry, translators and the Kafka producer together."""
    registry = default_registry()
    manager = TranslationManager.create(registry)
    kafka_producer = TranslatorKafkaProducer.create(config.KAFKA_BOOTSTRAP_SERVERS)
    return TranslationService(manager, kafka_producer)


def main():
    logger.info(f"Starting {config.SERVICE_NAME} on {config.API_HOST}:{config.API_PORT}...")
    service = build_service()
    app = create_app(service)
    try:
        uvicorn.run(app, host=config.API_HOST, port=config.API_PORT, log_level=config.LOG_LEVEL.lower())
    finally:
        service.kafka_producer.close()
        logger.info("Kura translator stopped.")


if __name__ == "__main__":
    main()
