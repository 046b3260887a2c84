# kura_translator/config.py
import os
from dotenv import load_dotenv

load_dotenv()

# Protocol descriptors
# Optional YAML file with extra connector descriptors, consulted before the packaged defaults
PROTOCOL_DESCRIPTORS_FILE = os.getenv("PROTOCOL_DESCRIPTORS_FILE")
DEFAULT_CHARSET = os.getenv("DEFAULT_CHARSET", "utf-8")

# Kafka Config
KAFKA_BOOTSTRAP_SERVERS = os.getenv("KAFKA_BOOTSTRAP_SERVERS", "localhost:9092")
KAFKA_TRANSLATED_TOPIC = os.getenv("KAFKA_TRANSLATED_TOPIC", "device_responses")
KAFKA_ERROR_TOPIC = os.getenv("KAFKA_ERROR_TOPIC", "iot_errors")  # Empty disables error publication

# API Config
API_HOST = os.getenv("API_HOST", "0.0.0.0")
API_PORT = int(os.getenv("API_PORT", "8080"))

# Service Config
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
SERVICE_NAME = "kura_translator"
