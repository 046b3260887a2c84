"""
Configuration loader utilities for protocol descriptors.

Descriptors live in YAML files under a top-level ``protocol_descriptors`` list:

    protocol_descriptors:
      - name: kura-mqtt
        transport: mqtt
        control_prefix: $EDC
"""
import os
import yaml
import logging
from typing import Dict, List, Optional, Any

logger = logging.getLogger(__name__)

DEFAULT_DESCRIPTORS_PATH = os.path.join(os.path.dirname(__file__), "protocol_descriptors.yaml")


def load_yaml_config(path: str) -> Optional[Dict[str, Any]]:
    """Load a YAML configuration file, returning None if it is missing or unreadable."""
    try:
        with open(path, 'r') as f:
            config_data = yaml.safe_load(f)
            logger.debug(f"Successfully loaded config from: {path}")
            return config_data or {}
    except FileNotFoundError:
        logger.error(f"Config file not found at: {path}")
        return None
    except yaml.YAMLError as e:
        logger.error(f"Failed to parse YAML config {path}: {e}")
        return None


def get_descriptor_configs(path: str = DEFAULT_DESCRIPTORS_PATH) -> List[Dict[str, Any]]:
    """
    Get protocol descriptor entries from a YAML config file.

    Args:
        path: Path of the YAML file

    Returns:
        List of descriptor dictionaries or empty list if none are configured
    """
    config_data = load_yaml_config(path)
    if not config_data:
        return []
    if not isinstance(config_data, dict):
        logger.error(f"Config file {path} must contain a mapping at top level")
        return []

    descriptors = config_data.get('protocol_descriptors', []) or []
    logger.debug(f"Found {len(descriptors)} protocol descriptor(s) in {path}")
    return descriptors
